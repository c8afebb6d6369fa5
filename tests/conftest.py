import json
import random

import pytest
from fastapi.testclient import TestClient

from main import create_app

MATH_SEED = [{"question": "2+2?", "genre": "math", "answers": ["4", "four"]}]


@pytest.fixture
def write_seed(tmp_path):
    def _write(entries, name="question-bank.json"):
        p = tmp_path / name
        p.write_text(json.dumps(entries), encoding="utf-8")
        return p

    return _write


@pytest.fixture
def app(write_seed):
    return create_app(seed_path=write_seed(MATH_SEED), rng=random.Random(0))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def math_id(app):
    return app.state.repo.all()[0].id
