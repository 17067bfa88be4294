"""Shared fixtures. Storage and database point at a temp dir before the backend is imported."""

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="crochet-tests-"))
os.environ["STORAGE_DIR"] = str(_TMP / "storage")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'gallery.db'}"

import pytest  # noqa: E402

from engine import Configuration  # noqa: E402


@pytest.fixture
def scenario_config():
    return Configuration(
        body_color="vanilla",
        num_layers=3,
        num_eyes=2,
        eye_color="blue",
        has_arms=False,
        has_legs=False,
        mouth_style="smile",
    )


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
