from flask import Blueprint, jsonify

from ..extensions import get_store

bp = Blueprint("pages", __name__)


@bp.get("/")
def index():
    # everything the portfolio page shows, keyed by collection
    return jsonify(get_store().snapshot())
