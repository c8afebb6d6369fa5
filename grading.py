from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple


class GradeStatus(str, Enum):
    CORRECT = "Correct"
    PARTIAL = "Partially Correct"
    INCORRECT = "Incorrect"


@dataclass(frozen=True)
class Grade:
    status: GradeStatus
    # (submitted answer, matches an accepted answer) in submission order
    results: List[Tuple[str, bool]] = field(default_factory=list)
    score: int = 0
    total: int = 0


def split_answers(text: str | None) -> List[str]:
    """Split a comma-separated answer string, trimming pieces and dropping empty ones."""
    if not text:
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def _fold(s: str) -> str:
    return s.lower()


def grade(submitted_text: str | None, accepted: Sequence[str]) -> Grade:
    """
    Classify a comma-separated submission against a question's accepted answers.

    Correct needs the submission to name every accepted answer exactly once:
    a repeated answer (case-insensitively) cannot fill two slots.
    """
    submitted = split_answers(submitted_text)
    accepted_set = {_fold(a) for a in accepted}
    folded = [_fold(s) for s in submitted]

    results = [(s, f in accepted_set) for s, f in zip(submitted, folded)]
    matched = {f for f in folded if f in accepted_set}

    distinct = len(set(folded)) == len(folded)
    if submitted and distinct and set(folded) == accepted_set and len(folded) == len(accepted_set):
        status = GradeStatus.CORRECT
    elif matched:
        status = GradeStatus.PARTIAL
    else:
        status = GradeStatus.INCORRECT

    return Grade(status=status, results=results, score=len(matched), total=len(accepted_set))
