from __future__ import annotations

from typing import Iterable, List, Optional

from models import Question


def _matches(q: Question, needle: str) -> bool:
    return (
        needle in q.question.lower()
        or needle in q.genre.lower()
        or any(needle in a.lower() for a in q.answers)
    )


def filter_questions(questions: Iterable[Question], query: Optional[str]) -> List[Question]:
    """Substring search over question text, genre and answers; keeps the input order."""
    qs = list(questions)
    if not query:
        return qs
    needle = query.lower()
    return [q for q in qs if _matches(q, needle)]
