"""Tests for KeyValueBackend and SubtreeProxy."""

import json

import pytest

from i18nchain import KeyValueBackend, Ref
from i18nchain.backend import SubtreeProxy
from i18nchain.diagnostics import InvalidPluralizationDataError, MissingTranslationError

DATA = {
    "foo": "Foo",
    "formats": {"short": "short", "long": "long"},
    "inbox": {"one": "One message", "other": "%{count} messages"},
}


class TestStorage:
    """How translations land in the flat store."""

    def test_leaves_are_json_encoded(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store).store_translations("en", DATA)

        assert json.loads(store["en.foo"]) == "Foo"
        assert json.loads(store["en.formats.short"]) == "short"

    def test_subtrees_stored_when_enabled(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store, subtrees=True).store_translations("en", DATA)

        assert json.loads(store["en.formats"]) == {"short": "short", "long": "long"}

    def test_leaves_only_when_subtrees_disabled(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store, subtrees=False).store_translations("en", DATA)

        assert "en.formats" not in store
        assert "en.formats.short" in store

    def test_subtrees_merge_with_previous_stores(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"formats": {"short": "short"}})
        backend.store_translations("en", {"formats": {"long": "long"}})

        assert backend.translate("en", "formats") == {"short": "short", "long": "long"}

    def test_dots_in_segments_are_escaped(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store).store_translations("en", {"versions": {"v1.2": "old"}})

        assert "en.versions.v1\x012" in store

    def test_escape_disabled(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store).store_translations(
            "en", {"versions": {"v1.2": "old"}}, {"escape": False}
        )

        assert "en.versions.v1.2" in store

    def test_callables_rejected(self) -> None:
        with pytest.raises(TypeError, match="cannot hold callables"):
            KeyValueBackend(subtrees=False).store_translations("en", {"fn": lambda *_: "x"})

    def test_non_ascii_values(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("lv", {"hello": "Sveiki, pasaule!", "ok": "Labi ✓"})
        assert backend.translate("lv", "ok") == "Labi ✓"


class TestLookup:
    """Translating from the flat store."""

    @pytest.fixture
    def backend(self) -> KeyValueBackend:
        backend = KeyValueBackend()
        backend.store_translations("en", DATA)
        return backend

    def test_leaf(self, backend: KeyValueBackend) -> None:
        assert backend.translate("en", "foo") == "Foo"
        assert backend.translate("en", "short", scope="formats") == "short"

    def test_custom_separator(self, backend: KeyValueBackend) -> None:
        assert backend.translate("en", "formats|short", separator="|") == "short"

    def test_escaped_segment_with_custom_separator(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"versions": {"v1.2": "old"}})
        assert backend.translate("en", "versions|v1.2", separator="|") == "old"

    def test_missing(self, backend: KeyValueBackend) -> None:
        with pytest.raises(MissingTranslationError):
            backend.translate("en", "nope")

    def test_pluralization_with_subtrees(self, backend: KeyValueBackend) -> None:
        assert backend.translate("en", "inbox", count=1) == "One message"
        assert backend.translate("en", "inbox", count=4) == "4 messages"

    def test_namespace_missing_without_subtrees(self) -> None:
        backend = KeyValueBackend(subtrees=False)
        backend.store_translations("en", DATA)
        assert backend.lookup("en", "formats") is None

    def test_pluralization_without_subtrees(self) -> None:
        backend = KeyValueBackend(subtrees=False)
        backend.store_translations("en", DATA)
        assert backend.translate("en", "inbox", count=1) == "One message"
        assert backend.translate("en", "inbox", count=7) == "7 messages"

    def test_missing_form_without_subtrees_is_a_miss(self) -> None:
        backend = KeyValueBackend(subtrees=False)
        backend.store_translations("en", {"n": {"one": "one"}})
        with pytest.raises(MissingTranslationError):
            backend.translate("en", "n", count=2)

    def test_missing_form_with_subtrees_is_bad_data(self) -> None:
        backend = KeyValueBackend(subtrees=True)
        backend.store_translations("en", {"n": {"one": "one"}})
        with pytest.raises(InvalidPluralizationDataError):
            backend.translate("en", "n", count=2)

    def test_stored_null_is_missing(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"unset": None})
        with pytest.raises(MissingTranslationError):
            backend.translate("en", "unset")


class TestLinks:
    """Ref values become key links."""

    def test_leaf_link(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"ok": "OK", "confirm": Ref("ok")})
        assert backend.translate("en", "confirm") == "OK"

    def test_prefix_link(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"formats": {"short": "s"}, "alias": Ref("formats")})
        assert backend.translate("en", "alias.short") == "s"

    def test_prefix_only_on_segment_boundary(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations(
            "en", {"formats": {"short": "s"}, "al": Ref("formats"), "alias": "Alias"}
        )
        assert backend.translate("en", "alias") == "Alias"

    def test_links_are_per_locale(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"ok": "OK", "confirm": Ref("ok")})
        backend.store_translations("lv", {"ok": "Labi", "confirm": "Apstiprināt"})
        assert backend.translate("lv", "confirm") == "Apstiprināt"

    def test_refs_left_out_of_subtrees(self) -> None:
        store: dict[str, str] = {}
        KeyValueBackend(store).store_translations("en", {"ns": {"a": "A", "b": Ref("x")}})
        assert json.loads(store["en.ns"]) == {"a": "A"}


class TestSubtreeProxy:
    """Lazy plural view over leaf keys."""

    @pytest.fixture
    def store(self) -> dict[str, str]:
        return {
            "en.inbox.one": json.dumps("One"),
            "en.inbox.other": json.dumps("Many"),
        }

    def test_fetches_on_access(self, store: dict[str, str]) -> None:
        proxy = SubtreeProxy("en.inbox", store)
        assert proxy["one"] == "One"
        store["en.inbox.one"] = json.dumps("Changed")
        assert proxy["one"] == "One"

    def test_missing_form(self, store: dict[str, str]) -> None:
        proxy = SubtreeProxy("en.inbox", store)
        assert "few" not in proxy
        assert proxy.get("few") is None
        with pytest.raises(KeyError):
            proxy["few"]

    def test_iterates_present_plural_forms(self, store: dict[str, str]) -> None:
        proxy = SubtreeProxy("en.inbox", store)
        assert list(proxy) == ["one", "other"]
        assert len(proxy) == 2
        assert dict(proxy) == {"one": "One", "other": "Many"}

    def test_empty_proxy_is_falsy(self) -> None:
        assert not SubtreeProxy("en.nothing", {})


class TestLifecycleAndIntrospection:
    """available_locales, translations(), reload."""

    def test_available_locales_from_store_keys(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"a": "A"})
        backend.store_translations("lv", {"a": "A"})
        assert backend.available_locales() == ("en", "lv")

    def test_translations_rebuilds_tree(self) -> None:
        backend = KeyValueBackend()
        backend.store_translations("en", {"a": "A", "ns": {"b": "B", "v1.2": "V"}})
        assert backend.translations() == {"en": {"a": "A", "ns": {"b": "B", "v1.2": "V"}}}

    def test_reload_keeps_store(self) -> None:
        store: dict[str, str] = {}
        backend = KeyValueBackend(store)
        backend.store_translations("en", {"a": "A"})
        backend.eager_load()

        backend.reload()

        assert backend.initialized is False
        assert store
        assert backend.translate("en", "a") == "A"

    def test_wraps_existing_store(self) -> None:
        store = {"en.greeting": json.dumps("Hello")}
        assert KeyValueBackend(store).translate("en", "greeting") == "Hello"

    def test_subtrees_property(self) -> None:
        assert KeyValueBackend().subtrees is True
        assert KeyValueBackend(subtrees=False).subtrees is False
