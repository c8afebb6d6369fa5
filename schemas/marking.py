# schemas/marking.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from grading import GradeStatus


class MarkRequest(BaseModel):
    id: str
    answer: str


class MarkResult(BaseModel):
    answer: str
    correct: bool


class MarkResponse(BaseModel):
    ok: bool
    status: GradeStatus
    score: int = 0
    total: int = 0
    results: List[MarkResult] = []
    feedback: Optional[str] = None
