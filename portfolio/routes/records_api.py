from flask import Blueprint, jsonify, request

from ..collections import list_collections
from ..extensions import get_store
from ..utils.payloads import extract_item, request_body

bp = Blueprint("records_api", __name__)


def api_list(key: str):
    return jsonify(get_store().get_all(key))


def api_get(key: str, record_id: str):
    return jsonify(get_store().get_by_id(key, record_id))


def api_create(key: str):
    item = get_store().create(key, extract_item(request_body(request)))
    return jsonify(item), 201


def api_update(key: str, record_id: str):
    item = get_store().update(key, record_id, extract_item(request_body(request)))
    return jsonify({"message": "Item atualizado com sucesso", "item": item})


def api_delete(key: str, record_id: str):
    get_store().delete(key, record_id)
    return jsonify({"message": "Item deletado com sucesso"})


# One set of CRUD routes per list collection: /cursos, /cursos/<id>, ...
for _c in list_collections():
    _defaults = {"key": _c.key}
    bp.add_url_rule(f"/{_c.route}", f"{_c.key}_list", api_list, methods=["GET"], defaults=_defaults)
    bp.add_url_rule(f"/{_c.route}", f"{_c.key}_create", api_create, methods=["POST"], defaults=_defaults)
    bp.add_url_rule(f"/{_c.route}/<record_id>", f"{_c.key}_get", api_get, methods=["GET"], defaults=_defaults)
    bp.add_url_rule(f"/{_c.route}/<record_id>", f"{_c.key}_update", api_update, methods=["PUT"], defaults=_defaults)
    bp.add_url_rule(f"/{_c.route}/<record_id>", f"{_c.key}_delete", api_delete, methods=["DELETE"], defaults=_defaults)
