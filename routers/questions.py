from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from bank import QuestionRepository
from deps.repository import get_repo
from schemas.questions import QuestionCreate
from search import filter_questions
from templating import templates

logger = logging.getLogger("quiz.routes")

router = APIRouter(tags=["questions"])


@router.get("/questions")
def list_questions(
    request: Request,
    search: Optional[str] = None,
    repo: QuestionRepository = Depends(get_repo),
):
    return templates.TemplateResponse(
        request,
        "questions.html",
        {"queries": filter_questions(repo.all(), search), "search": search or ""},
    )


@router.post("/questions")
def add_question(
    question: str = Form(""),
    genre: str = Form(""),
    answers: str = Form(""),
    repo: QuestionRepository = Depends(get_repo),
):
    body = QuestionCreate(question=question, genre=genre, answers=answers)
    q = repo.add(body.question, body.genre, body.answers)
    logger.debug("Added question %s: %r", q.id, body.model_dump())
    # 303 so a refresh of the list page cannot resubmit the form
    return RedirectResponse(url="/questions", status_code=303)
