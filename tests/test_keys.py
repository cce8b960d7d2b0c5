"""Tests for key normalization helpers."""

from hypothesis import given
from hypothesis import strategies as st

from i18nchain.core import (
    escape_default_separator,
    normalize_flat_keys,
    normalize_key,
    normalize_keys,
    stringify_keys,
)
from tests.strategies import key_segments


class TestNormalizeKey:
    """normalize_key splits one key into segments."""

    def test_dotted_string(self) -> None:
        assert normalize_key("formats.short") == ("formats", "short")

    def test_sequence_of_keys(self) -> None:
        assert normalize_key(["formats", "date.short"]) == ("formats", "date", "short")

    def test_none_is_empty(self) -> None:
        assert normalize_key(None) == ()

    def test_empty_segments_dropped(self) -> None:
        assert normalize_key("a..b.") == ("a", "b")

    def test_non_string_converted(self) -> None:
        assert normalize_key(42) == ("42",)

    def test_custom_separator(self) -> None:
        assert normalize_key("a|b.c", "|") == ("a", "b.c")

    @given(segments=st.lists(key_segments(), min_size=1, max_size=5))
    def test_join_then_split_roundtrip(self, segments: list[str]) -> None:
        """Property: splitting a joined key gives back its segments."""
        assert normalize_key(".".join(segments)) == tuple(segments)


class TestNormalizeKeys:
    """normalize_keys prefixes locale and scope."""

    def test_locale_scope_key(self) -> None:
        assert normalize_keys("en", "short", scope="formats") == ("en", "formats", "short")

    def test_scope_as_list(self) -> None:
        assert normalize_keys("en", "c", scope=["a", "b"]) == ("en", "a", "b", "c")

    def test_separator(self) -> None:
        assert normalize_keys("en", "a|b", separator="|") == ("en", "a", "b")

    def test_no_key(self) -> None:
        assert normalize_keys("en", None) == ("en",)


class TestNormalizeFlatKeys:
    """normalize_flat_keys builds keys for flat key-value stores."""

    def test_scope_and_key(self) -> None:
        assert normalize_flat_keys("short", scope="formats") == "formats.short"

    def test_default_separator_keeps_dots(self) -> None:
        assert normalize_flat_keys("formats.short") == "formats.short"

    def test_custom_separator_escapes_dots(self) -> None:
        assert normalize_flat_keys("v1.2|name", separator="|") == "v1\x012.name"

    def test_list_key(self) -> None:
        assert normalize_flat_keys(["a", "b"], scope="s") == "s.a.b"


class TestEscapeAndStringify:
    """escape_default_separator and stringify_keys."""

    def test_escape_default_separator(self) -> None:
        assert escape_default_separator("v1.2") == "v1\x012"
        assert escape_default_separator("plain") == "plain"

    def test_stringify_keys_nested(self) -> None:
        assert stringify_keys({1: "one", "nested": {True: "yes"}}) == {
            "1": "one",
            "nested": {"True": "yes"},
        }

    def test_stringify_keys_copies(self) -> None:
        source = {"a": {"b": "c"}}
        copy = stringify_keys(source)
        copy["a"]["b"] = "changed"
        assert source == {"a": {"b": "c"}}
