from __future__ import annotations

import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_BRACKET_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")


def coerce_id(value) -> int | None:
    """Read a record id the lenient way: leading digits count, anything else is None.

    "3" -> 3, " 12abc" -> 12, "abc" -> None, 4.0 -> 4.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    m = _LEADING_INT.match(str(value or ""))
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # past the interpreter's int-string digit limit
        return None


def expand_form(pairs) -> dict:
    """Turn bracketed form keys into nested dicts.

    [("item[nome]", "Ana"), ("item[links][github]", "x")]
    -> {"item": {"nome": "Ana", "links": {"github": "x"}}}

    Repeated keys and empty brackets (``tags[]``) collect into lists.
    """
    out: dict = {}
    for raw_key, value in pairs:
        m = _BRACKET_KEY.match(raw_key)
        if not m:
            out[raw_key] = value
            continue
        path = [m.group(1)] + re.findall(r"\[([^\[\]]*)\]", m.group(2))
        append = len(path) > 1 and path[-1] == ""
        if append:
            path = path[:-1]
        node = out
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        last = path[-1]
        if append:
            prev = node.get(last)
            node[last] = (prev if isinstance(prev, list) else []) + [value]
        elif last in node:
            prev = node[last]
            node[last] = (prev if isinstance(prev, list) else [prev]) + [value]
        else:
            node[last] = value
    return out


def request_body(req) -> dict | list | None:
    """Decoded request body: JSON when sent as JSON, otherwise the expanded form."""
    if req.is_json:
        return req.get_json(silent=True)
    return expand_form(req.form.items(multi=True))


def extract_item(body):
    """The record payload of a request body: the nested ``item`` if present, else the body."""
    if isinstance(body, dict):
        item = body.get("item")
        if item or isinstance(item, dict):
            return item
    return body
