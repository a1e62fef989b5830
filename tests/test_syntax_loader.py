"""Tests for conversion of parser JSON output into the token tree."""

from __future__ import annotations

import pytest

from mfcompiler import Compiler, MalformedTokenError, UnrecognizedTokenError, template_from_json
from mfcompiler.syntax import token_from_json, tokens_from_json
from mfcompiler.syntax.ast import (
    Argument,
    Case,
    Catalog,
    FunctionCall,
    Message,
    Octothorpe,
    Plural,
    Select,
    SelectOrdinal,
    Text,
)


class TestTokenFromJson:
    def test_string_is_text(self) -> None:
        assert token_from_json("Hello ") == Text("Hello ")

    def test_argument(self) -> None:
        assert token_from_json({"type": "argument", "arg": "name"}) == Argument("name")

    def test_select(self) -> None:
        data = {
            "type": "select",
            "arg": "gender",
            "cases": [
                {"key": "male", "tokens": ["he"]},
                {"key": "other", "tokens": ["they"]},
            ],
        }
        assert token_from_json(data) == Select(
            "gender", (Case("male", (Text("he"),)), Case("other", (Text("they"),)))
        )

    def test_plural_with_offset_and_octothorpe(self) -> None:
        data = {
            "type": "plural",
            "arg": "n",
            "offset": 1,
            "cases": [{"key": "other", "tokens": [{"type": "octothorpe"}, " more"]}],
        }
        assert token_from_json(data) == Plural(
            "n", (Case("other", (Octothorpe(), Text(" more"))),), 1
        )

    def test_plural_offset_defaults_to_zero(self) -> None:
        data = {"type": "plural", "arg": "n", "cases": [{"key": "other", "tokens": []}]}
        token = token_from_json(data)
        assert isinstance(token, Plural)
        assert token.offset == 0

    def test_selectordinal_ignores_offset(self) -> None:
        data = {
            "type": "selectordinal",
            "arg": "n",
            "offset": 3,
            "cases": [{"key": "other", "tokens": []}],
        }
        token = token_from_json(data)
        assert token == SelectOrdinal("n", (Case("other", ()),))
        assert token.offset == 0

    def test_function_with_params(self) -> None:
        data = {"type": "function", "arg": "x", "key": "number", "params": ["integer"]}
        assert token_from_json(data) == FunctionCall("number", "x", ("integer",))

    def test_function_without_params(self) -> None:
        data = {"type": "function", "arg": "x", "key": "date"}
        assert token_from_json(data) == FunctionCall("date", "x", ())

    def test_case_keys_stringified(self) -> None:
        data = {"type": "select", "arg": "x", "cases": [{"key": 0, "tokens": []}, {"key": "other"}]}
        token = token_from_json(data)
        assert isinstance(token, Select)
        assert [c.key for c in token.cases] == ["0", "other"]

    def test_unknown_type(self) -> None:
        with pytest.raises(UnrecognizedTokenError):
            token_from_json({"type": "spellout", "arg": "x"})

    def test_missing_type(self) -> None:
        with pytest.raises(UnrecognizedTokenError):
            token_from_json({"arg": "x"})

    def test_non_mapping_token(self) -> None:
        with pytest.raises(UnrecognizedTokenError):
            token_from_json(42)

    def test_missing_field(self) -> None:
        with pytest.raises(MalformedTokenError, match="'arg'"):
            token_from_json({"type": "argument"})

    def test_missing_case_key(self) -> None:
        with pytest.raises(MalformedTokenError):
            token_from_json({"type": "select", "arg": "x", "cases": [{"tokens": []}]})


class TestTemplateFromJson:
    def test_list_is_message(self) -> None:
        template = template_from_json(["Hi ", {"type": "argument", "arg": "name"}])
        assert template == Message((Text("Hi "), Argument("name")))

    def test_dict_is_catalog(self) -> None:
        template = template_from_json({"en": ["Hi"], "fr": {"greeting": ["Salut"]}})
        assert isinstance(template, Catalog)
        assert list(template.entries) == ["en", "fr"]
        assert template.entries["fr"] == Catalog({"greeting": Message((Text("Salut"),))})

    def test_raw_source_without_parser(self) -> None:
        with pytest.raises(MalformedTokenError, match="requires a parser"):
            template_from_json("Hello {name}")

    def test_raw_source_with_parser(self) -> None:
        def parse(source: str) -> list[object]:
            return [source.upper()]

        assert template_from_json({"en": "hi"}, parse) == Catalog({"en": Message((Text("HI"),))})

    def test_unsupported_data(self) -> None:
        with pytest.raises(MalformedTokenError):
            template_from_json(3.14)

    def test_tokens_from_json_empty(self) -> None:
        assert tokens_from_json([]) == ()

    def test_end_to_end_compile(self) -> None:
        data = {
            "en": [
                "You have ",
                {
                    "type": "plural",
                    "arg": "count",
                    "cases": [
                        {"key": "one", "tokens": ["one message"]},
                        {"key": "other", "tokens": [{"type": "octothorpe"}, " messages"]},
                    ],
                },
            ]
        }
        result = Compiler().compile(template_from_json(data), "en", {"en"})
        assert result == {
            "en": 'function(d) { return "You have " + plural(d.count, 0, en, '
            '{ one: "one message", other: number(d.count) + " messages" }); }'
        }
