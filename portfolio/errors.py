from flask import current_app, jsonify

from .storage.json_store import (
    InvalidPayload,
    NotAListCollection,
    PersistError,
    RecordNotFound,
    UnknownCollection,
)

NOT_FOUND_MESSAGE = "Item não encontrado"


def _not_found(e):
    return jsonify({"message": NOT_FOUND_MESSAGE}), 404


def _unknown_collection(e):
    return jsonify({"message": str(e)}), 404


def _invalid_payload(e):
    return jsonify({"message": str(e)}), 400


def _not_a_list(e):
    if e.expected == "singleton":
        return jsonify({"message": f"Erro: {e.key} não é um objeto único."}), 500
    return jsonify({"message": f"Erro: {e.key} não é uma lista."}), 500


def _persist_failed(e):
    # memory already holds the change; only the file is behind
    current_app.logger.error("Write to %s failed; in-memory state is ahead of disk", e.key)
    return jsonify({"message": f"Erro ao salvar {e.key}"}), 500


def register_error_handlers(app):
    app.register_error_handler(RecordNotFound, _not_found)
    app.register_error_handler(UnknownCollection, _unknown_collection)
    app.register_error_handler(InvalidPayload, _invalid_payload)
    app.register_error_handler(NotAListCollection, _not_a_list)
    app.register_error_handler(PersistError, _persist_failed)
