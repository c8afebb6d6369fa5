import logging
import random
import sys
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

import config
from bank import QuestionRepository, SeedLoadError, build_repository

# Routers
from routers.api import router as api_router
from routers.health import router as health_router
from routers.questions import router as questions_router
from routers.quiz import router as quiz_router

logger = logging.getLogger("quiz")
logging.basicConfig(level=config.LOG_LEVEL)


def create_app(
    seed_path: Optional[Path] = None,
    repo: Optional[QuestionRepository] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """
    Build the app around a question repository.

    The seed file is loaded before the app exists; a SeedLoadError propagates so
    nothing is ever served from a missing or half-read bank.
    """
    if repo is None:
        repo = build_repository(seed_path or config.SEED_PATH, rng=rng)

    app = FastAPI(title="Trivia Quiz")
    app.state.repo = repo

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s %s", request.method, request.url.path, dict(request.query_params))
        return await call_next(request)

    app.mount("/static", StaticFiles(directory=str(config.STATIC_DIR)), name="static")

    app.include_router(quiz_router)  # /, /quiz
    app.include_router(questions_router)  # /questions
    app.include_router(api_router)  # /api/...
    app.include_router(health_router)  # /health
    return app


def run() -> None:
    try:
        application = create_app()
    except SeedLoadError as e:
        logger.error("Error loading question bank: %s", e)
        sys.exit(1)

    logger.info("Loaded questions from %s. Starting server...", config.SEED_PATH)
    logger.info("Serving on http://%s:%d (CTRL+C to shut down)", config.HOST, config.PORT)
    uvicorn.run(application, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
