from __future__ import annotations

from markupsafe import Markup

from grading import Grade

CORRECT_CLASS = "correct-answer"
INCORRECT_CLASS = "incorrect-answer"

_SPAN = Markup('<span class="{}">{}</span>')


def decorate(answer: str, correct: bool) -> Markup:
    # answer text is escaped by Markup.format
    return _SPAN.format(CORRECT_CLASS if correct else INCORRECT_CLASS, answer)


def decorate_all(g: Grade) -> Markup:
    return Markup(", ").join(decorate(ans, ok) for ans, ok in g.results)
