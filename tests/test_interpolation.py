"""Tests for %{name} interpolation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nchain.diagnostics import (
    MissingInterpolationArgumentError,
    ReservedInterpolationKeyError,
)
from i18nchain.runtime import deep_interpolate, interpolate
from tests.strategies import key_segments, leaf_values


class TestInterpolate:
    """interpolate() on single strings."""

    def test_named_placeholder(self) -> None:
        assert interpolate("Hello %{name}!", {"name": "Anna"}) == "Hello Anna!"

    def test_value_converted_with_str(self) -> None:
        assert interpolate("%{count} items", {"count": 3}) == "3 items"

    def test_formatted_placeholder(self) -> None:
        assert interpolate("%<total>.2f", {"total": 12.5}) == "12.50"
        assert interpolate("%<n>05d", {"n": 42}) == "00042"

    def test_escaped_percent(self) -> None:
        assert interpolate("100%% of %{x}", {"x": "it"}) == "100% of it"

    def test_escaped_placeholder_is_literal(self) -> None:
        assert interpolate("%%{name}", {"name": "Anna"}) == "%{name}"

    def test_callable_value_receives_bindings(self) -> None:
        values = {"first": "Ada", "full": lambda v: f"{v['first']} Lovelace"}
        assert interpolate("%{full}", values) == "Ada Lovelace"

    def test_missing_binding(self) -> None:
        with pytest.raises(MissingInterpolationArgumentError) as exc_info:
            interpolate("Hi %{name}", {"other": 1})
        assert exc_info.value.key == "name"

    def test_missing_handler(self) -> None:
        result = interpolate("Hi %{name}", {}, on_missing=lambda name, values, string: "?")
        assert result == "Hi ?"

    @pytest.mark.parametrize("reserved", ["scope", "default", "separator", "resolve", "object"])
    def test_reserved_names_rejected(self, reserved: str) -> None:
        with pytest.raises(ReservedInterpolationKeyError):
            interpolate(f"%{{{reserved}}}", {reserved: "x"})

    def test_count_is_not_reserved(self) -> None:
        assert interpolate("%{count}", {"count": 1}) == "1"

    @given(text=leaf_values())
    def test_text_without_placeholders_unchanged(self, text: str) -> None:
        """Property: text without '%' passes through untouched."""
        assert interpolate(text, {"x": "y"}) == text

    @given(name=key_segments(), value=leaf_values())
    def test_placeholder_replaced_by_value(self, name: str, value: str) -> None:
        assert interpolate(f"<%{{{name}}}>", {name: value}) == f"<{value}>"


class TestDeepInterpolate:
    """deep_interpolate() through nested values."""

    def test_nested(self) -> None:
        assert deep_interpolate({"a": "%{x}", "b": ["%{x}!", 3]}, {"x": "X"}) == {
            "a": "X",
            "b": ["X!", 3],
        }

    def test_non_strings_unchanged(self) -> None:
        assert deep_interpolate(42, {"x": "X"}) == 42

    def test_input_not_mutated(self) -> None:
        source = {"a": "%{x}"}
        deep_interpolate(source, {"x": "X"})
        assert source == {"a": "%{x}"}

    @given(values=st.lists(leaf_values(), max_size=4))
    def test_list_length_preserved(self, values: list[str]) -> None:
        assert len(deep_interpolate(values, {})) == len(values)  # type: ignore[arg-type]
