# routers/health.py
from fastapi import APIRouter, Depends

from bank import QuestionRepository
from deps.repository import get_repo

router = APIRouter(tags=["health"])


@router.get("/health")
def health(repo: QuestionRepository = Depends(get_repo)):
    return {"ok": True, "count": len(repo)}
