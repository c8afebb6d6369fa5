from __future__ import annotations

import uuid
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    return str(uuid.uuid4())


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    question: str
    genre: str
    # accepted answers, insertion order; order does not matter for grading
    answers: Tuple[str, ...]
