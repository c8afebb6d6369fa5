from fastapi import Request

from bank import QuestionRepository


def get_repo(request: Request) -> QuestionRepository:
    """The question repository owned by the running app (set up in main.create_app)."""
    return request.app.state.repo
