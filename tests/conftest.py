import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported anywhere.
_DB_DIR = tempfile.mkdtemp(prefix="tutor-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

import pytest  # noqa: E402

import models  # noqa: E402,F401
from db import Base, engine  # noqa: E402
from deps.rng import get_rng  # noqa: E402
from main import app  # noqa: E402

Base.metadata.create_all(bind=engine)


class ScriptedRng:
    """
    Stand-in random source.
    choice() picks by the next index in `picks` (0 once they run out),
    uniform() always returns `value`, random() always returns `jitter`.
    """

    def __init__(self, picks=(), value=0.25, jitter=0.5):
        self.picks = list(picks)
        self.value = value
        self.jitter = jitter

    def choice(self, seq):
        idx = self.picks.pop(0) if self.picks else 0
        return seq[idx]

    def uniform(self, a, b):
        return self.value

    def random(self):
        return self.jitter


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def use_rng():
    """Install a ScriptedRng for the API; returns a setter taking the same args."""

    def _install(*args, **kwargs):
        rng = ScriptedRng(*args, **kwargs)
        app.dependency_overrides[get_rng] = lambda: rng
        return rng

    yield _install
    app.dependency_overrides.pop(get_rng, None)
