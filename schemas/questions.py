# schemas/questions.py
from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, field_validator

from grading import split_answers


class QuestionOut(BaseModel):
    id: str
    question: str
    genre: str
    answers: List[str]


class QuestionCreate(BaseModel):
    question: str
    genre: str
    answers: List[str]

    @field_validator("answers", mode="before")
    @classmethod
    def _normalize_answers(cls, v: Union[str, List[str]]):
        # accept the HTML form shape ("a, b, c") as well as a JSON list
        if isinstance(v, str):
            return split_answers(v)
        if isinstance(v, list) and all(isinstance(a, str) for a in v):
            return [a.strip() for a in v if a.strip()]
        return v
