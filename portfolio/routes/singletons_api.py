from flask import Blueprint, jsonify, redirect, request, url_for

from ..collections import singleton_collections
from ..extensions import get_store
from ..utils.payloads import extract_item, request_body

bp = Blueprint("singletons_api", __name__)


def api_get(key: str):
    return jsonify(get_store().get_all(key))


def api_replace(key: str):
    """Replace the whole object. Form posts go back to the page like the HTML editor expects."""
    doc = get_store().update_singleton(key, extract_item(request_body(request)))
    if not request.is_json:
        return redirect(url_for("pages.index"))
    return jsonify(doc)


for _c in singleton_collections():
    _defaults = {"key": _c.key}
    bp.add_url_rule(f"/{_c.route}", f"{_c.key}_get", api_get, methods=["GET"], defaults=_defaults)
    bp.add_url_rule(f"/{_c.route}", f"{_c.key}_replace", api_replace, methods=["PUT"], defaults=_defaults)
