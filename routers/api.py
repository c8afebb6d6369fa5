from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from bank import QuestionRepository
from deps.repository import get_repo
from grading import GradeStatus, grade
from schemas.marking import MarkRequest, MarkResponse
from schemas.questions import QuestionCreate, QuestionOut
from search import filter_questions

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/questions", response_model=List[QuestionOut])
def api_list_questions(search: Optional[str] = None, repo: QuestionRepository = Depends(get_repo)):
    return [q.model_dump() for q in filter_questions(repo.all(), search)]


@router.get("/questions/{qid}", response_model=QuestionOut)
def api_get_question(qid: str, repo: QuestionRepository = Depends(get_repo)):
    q = repo.find_by_id(qid)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")
    return q.model_dump()


@router.post("/questions", response_model=QuestionOut, status_code=201)
def api_add_question(body: QuestionCreate, repo: QuestionRepository = Depends(get_repo)):
    return repo.add(body.question, body.genre, body.answers).model_dump()


@router.post("/mark", response_model=MarkResponse)
def api_mark(req: MarkRequest, repo: QuestionRepository = Depends(get_repo)):
    q = repo.find_by_id(req.id)
    if not q:
        return {"ok": False, "status": GradeStatus.INCORRECT, "feedback": "unknown question id"}

    g = grade(req.answer, q.answers)
    return {
        "ok": True,
        "status": g.status,
        "score": g.score,
        "total": g.total,
        "results": [{"answer": a, "correct": c} for a, c in g.results],
    }
