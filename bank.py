from __future__ import annotations

import json
import logging
import random as _rnd
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ValidationError

from models import Question

logger = logging.getLogger("quiz.bank")


class SeedLoadError(RuntimeError):
    """The seed file could not be read or does not hold a valid question list."""


class SeedEntry(BaseModel):
    # any "id" in the seed file is ignored; fresh ids are assigned on load
    question: str
    genre: str
    answers: List[str]


def _read_json(p: Path) -> Any:
    try:
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SeedLoadError(f"cannot read seed file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedLoadError(f"malformed JSON in seed file {p}: {e}") from e


def load_seed(path: Path | str) -> List[SeedEntry]:
    """
    Parse a seed file holding a JSON array of {question, genre, answers} objects.

    Unlike a lenient loader this is all-or-nothing: a single bad record fails the
    whole file, so the app never starts with a partial bank.
    """
    p = Path(path)
    data = _read_json(p)
    if not isinstance(data, list):
        raise SeedLoadError(f"seed file {p} must contain a JSON array, got {type(data).__name__}")

    entries: List[SeedEntry] = []
    for idx, raw in enumerate(data):
        try:
            entries.append(SeedEntry.model_validate(raw))
        except ValidationError as e:
            raise SeedLoadError(f"invalid seed entry #{idx} in {p}: {e}") from e
    return entries


class QuestionRepository:
    def __init__(self, rng: Optional[_rnd.Random] = None) -> None:
        self._questions: List[Question] = []
        self._rng = rng or _rnd.Random()

    def __len__(self) -> int:
        return len(self._questions)

    def load_all(self, entries: Iterable[SeedEntry]) -> int:
        self._questions = [
            Question(question=e.question, genre=e.genre, answers=tuple(e.answers)) for e in entries
        ]
        logger.info("Loaded %d questions", len(self._questions))
        return len(self._questions)

    def add(self, question: str, genre: str, answers: Sequence[str]) -> Question:
        q = Question(question=question, genre=genre, answers=tuple(answers))
        self._questions.append(q)
        return q

    def all(self) -> List[Question]:
        return self._questions

    def find_by_id(self, qid: str) -> Optional[Question]:
        return next((q for q in self._questions if q.id == qid), None)

    def pick_random(self) -> Optional[Question]:
        if not self._questions:
            return None
        return self._rng.choice(self._questions)


def build_repository(path: Path | str, rng: Optional[_rnd.Random] = None) -> QuestionRepository:
    repo = QuestionRepository(rng=rng)
    repo.load_all(load_seed(path))
    return repo
