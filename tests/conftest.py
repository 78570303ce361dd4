import os
import random
import tempfile

# Point the app at a throwaway database before any app module reads settings
_DB_DIR = tempfile.mkdtemp(prefix="soschool-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from engines.exercises import ExerciseGenerator  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def generator(rng):
    return ExerciseGenerator(rng)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        yield test_client
