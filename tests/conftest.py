"""
Shared test fixtures and configuration for the portfolio backend tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from portfolio import create_app
from portfolio.config import Config
from portfolio.storage.json_store import RecordStore


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for store tests."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def record_store(temp_data_dir: Path) -> RecordStore:
    """A RecordStore with every collection loaded from an empty directory."""
    store = RecordStore(temp_data_dir)
    store.load_all()
    return store


@pytest.fixture
def app(temp_data_dir: Path) -> Flask:
    """Create and configure a test Flask application instance."""
    test_config = type("TestConfig", (Config,), {"DATA_DIR": temp_data_dir, "TESTING": True})
    app = create_app(test_config)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def store(app: Flask) -> RecordStore:
    """The store the test app's routes talk to."""
    with app.app_context():
        from portfolio.extensions import get_store
        return get_store()


@pytest.fixture
def seed_collection(temp_data_dir: Path):
    """Write a collection file the way it would exist before the app starts."""
    def _seed(key: str, value) -> Path:
        path = temp_data_dir / f"{key}.json"
        path.write_text(json.dumps(value), encoding="utf-8")
        return path
    return _seed


@pytest.fixture
def read_collection(temp_data_dir: Path):
    """Read a collection file back from disk."""
    def _read(key: str):
        with open(temp_data_dir / f"{key}.json", encoding="utf-8") as f:
            return json.load(f)
    return _read
