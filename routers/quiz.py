from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse

from bank import QuestionRepository
from deps.repository import get_repo
from grading import grade
from presentation import decorate_all
from templating import templates

logger = logging.getLogger("quiz.routes")

router = APIRouter(tags=["quiz"])

NO_QUESTIONS_MSG = "No questions available!"
INVALID_QUESTION_MSG = "Invalid question submitted."


@router.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/quiz", status_code=302)


@router.get("/quiz")
def show_quiz(request: Request, repo: QuestionRepository = Depends(get_repo)):
    q = repo.pick_random()
    if q is None:
        return PlainTextResponse(NO_QUESTIONS_MSG)
    return templates.TemplateResponse(
        request,
        "quiz.html",
        {"question": q.question, "id": q.id, "answer": "", "correction": "", "status": ""},
    )


@router.post("/quiz")
def submit_quiz(
    request: Request,
    qid: str = Form("", alias="id"),
    answer: str = Form(""),
    repo: QuestionRepository = Depends(get_repo),
):
    q = repo.find_by_id(qid)
    if q is None:
        logger.info("Answer submitted for unknown question id %r", qid)
        return PlainTextResponse(INVALID_QUESTION_MSG)

    g = grade(answer, q.answers)
    return templates.TemplateResponse(
        request,
        "quiz.html",
        {
            "question": q.question,
            "id": q.id,
            "answer": answer,
            "correction": decorate_all(g),
            "status": g.status.value,
        },
    )
