"""
Unit tests for request payload helpers.
"""
import pytest

from portfolio.utils.payloads import coerce_id, expand_form, extract_item


@pytest.mark.unit
class TestCoerceId:

    @pytest.mark.parametrize("value,expected", [
        (3, 3),
        ("3", 3),
        (" 12", 12),
        ("12abc", 12),
        ("-2", -2),
        (4.0, 4),
        (4.7, 4),
    ])
    def test_numeric_values(self, value, expected):
        assert coerce_id(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, "x12", True, float("nan"), float("inf"), pytest.param("9" * 5000, id="too-many-digits")])
    def test_non_numeric_values(self, value):
        assert coerce_id(value) is None


@pytest.mark.unit
class TestExpandForm:

    def test_plain_keys(self):
        assert expand_form([("nome", "Ana"), ("cidade", "Recife")]) == {"nome": "Ana", "cidade": "Recife"}

    def test_bracket_keys_nest(self):
        pairs = [
            ("item[nome]", "Ana"),
            ("item[links][github]", "https://github.com/ana"),
            ("item[links][site]", "https://ana.dev"),
        ]

        assert expand_form(pairs) == {
            "item": {
                "nome": "Ana",
                "links": {"github": "https://github.com/ana", "site": "https://ana.dev"},
            }
        }

    def test_empty_brackets_collect_list(self):
        pairs = [("item[tags][]", "flask"), ("item[tags][]", "json")]

        assert expand_form(pairs) == {"item": {"tags": ["flask", "json"]}}

    def test_repeated_key_collects_list(self):
        assert expand_form([("tag", "a"), ("tag", "b"), ("tag", "c")]) == {"tag": ["a", "b", "c"]}

    def test_malformed_key_kept_verbatim(self):
        assert expand_form([("item[nome", "Ana")]) == {"item[nome": "Ana"}


@pytest.mark.unit
class TestExtractItem:

    def test_nested_item_wins(self):
        assert extract_item({"item": {"titulo": "X"}, "other": 1}) == {"titulo": "X"}

    def test_empty_nested_item_is_used(self):
        assert extract_item({"item": {}}) == {}

    def test_raw_body_without_item(self):
        assert extract_item({"titulo": "X"}) == {"titulo": "X"}

    def test_falsy_item_falls_back_to_body(self):
        assert extract_item({"item": "", "titulo": "X"}) == {"item": "", "titulo": "X"}

    def test_non_dict_body_passes_through(self):
        assert extract_item([1, 2]) == [1, 2]
        assert extract_item(None) is None
