"""Tests for the JSON codec."""

from dataclasses import dataclass

import pytest

from objectkit.codec import from_json, to_json
from objectkit.config import ObjectKitConfig
from objectkit.errors import ObjectKitError, ParseError
from objectkit.model import Circle, Rectangle


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self) -> None:
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping_keeps_insertion_order(self) -> None:
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert to_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_scalars(self) -> None:
        assert to_json(None) == "null"
        assert to_json(True) == "true"
        assert to_json("text") == '"text"'
        assert to_json(1.5) == "1.5"

    def test_non_ascii_kept(self) -> None:
        assert to_json({"name": "café"}) == '{"name":"café"}'

    def test_ensure_ascii_config(self) -> None:
        cfg = ObjectKitConfig(json_ensure_ascii=True)
        assert to_json("café", config=cfg) == '"caf\\u00e9"'

    def test_indent_config(self) -> None:
        cfg = ObjectKitConfig(json_indent=2)
        assert to_json({"a": 1}, config=cfg) == '{\n  "a": 1\n}'

    def test_dataclass_encodes_fields(self) -> None:
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_encodes_public_attributes(self) -> None:
        class Point:
            def __init__(self) -> None:
                self.x = 1
                self.y = 2
                self._hidden = 3

        assert to_json(Point()) == '{"x":1,"y":2}'

    def test_unserialisable_value(self) -> None:
        with pytest.raises(TypeError):
            to_json({1, 2})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_rejected(self, value: float) -> None:
        with pytest.raises(ValueError):
            to_json({"x": value})


# ---------------------------------------------------------------------------
# Deserialisation
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_binds_fields_and_methods(self) -> None:
        circle = from_json(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.area() == pytest.approx(314.159265, rel=1e-6)

    def test_rectangle(self) -> None:
        rect = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(rect, Rectangle)
        assert rect.area() == 200

    def test_init_not_called(self) -> None:
        class Strict:
            def __init__(self) -> None:
                raise AssertionError("__init__ must not run")

            def describe(self) -> str:
                return f"strict {self.name}"

        obj = from_json(Strict, '{"name":"x"}')
        assert obj.describe() == "strict x"

    def test_extra_fields_become_attributes(self) -> None:
        rect = from_json(Rectangle, '{"width":2,"height":3,"color":"red"}')
        assert rect.color == "red"  # type: ignore[attr-defined]
        assert rect.area() == 6

    def test_frozen_dataclass_target(self) -> None:
        @dataclass(frozen=True)
        class Label:
            text: str

            def shout(self) -> str:
                return self.text.upper()

        assert from_json(Label, '{"text":"hi"}').shout() == "HI"

    def test_without_class_returns_plain_value(self) -> None:
        assert from_json(None, "[1,2,3]") == [1, 2, 3]
        assert from_json(None, '{"a":null}') == {"a": None}

    def test_round_trip(self) -> None:
        original = Rectangle(width=4.5, height=2)
        restored = from_json(Rectangle, to_json(original))
        assert restored == original

    def test_round_trip_nested_values(self) -> None:
        data = {"tags": ["a", "b"], "meta": {"ok": True, "n": None}, "x": 1}
        restored = from_json(None, to_json(data))
        assert restored == data


class TestFromJsonErrors:
    def test_malformed_text(self) -> None:
        with pytest.raises(ParseError) as info:
            from_json(Circle, '{"radius": }')
        assert info.value.line == 1
        assert info.value.column is not None
        assert info.value.cause is not None

    def test_multiline_position(self) -> None:
        with pytest.raises(ParseError) as info:
            from_json(None, '{\n  "a": 1,\n  oops\n}')
        assert info.value.line == 3

    def test_non_object_for_class(self) -> None:
        with pytest.raises(ParseError, match="Expected a JSON object"):
            from_json(Circle, "[1,2]")

    def test_non_text_input(self) -> None:
        with pytest.raises(ParseError):
            from_json(Circle, 42)  # type: ignore[arg-type]

    def test_parse_error_is_objectkit_error(self) -> None:
        assert issubclass(ParseError, ObjectKitError)
