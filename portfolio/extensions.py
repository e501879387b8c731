# portfolio/extensions.py
from flask import Flask, current_app
from flask_cors import CORS

from .storage.json_store import RecordStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

STORE_KEY = "record_store"


def init_store(app: Flask) -> RecordStore:
    """Build the app's record store and load every collection from DATA_DIR."""
    store = RecordStore(app.config["DATA_DIR"], logger=app.logger)
    failed = store.load_all()
    if failed:
        app.logger.warning("Collections running on defaults: %s", ", ".join(failed))
    app.extensions[STORE_KEY] = store
    return store


def get_store() -> RecordStore:
    return current_app.extensions[STORE_KEY]
