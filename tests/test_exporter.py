"""Tests for kvbind.export.exporter."""

from ruamel.yaml import YAML
from kvbind.core.store import LineStore
from kvbind.export.exporter import StoreExporter


def _store() -> LineStore:
    store = LineStore()
    store.set_default("timeout", "30")
    store.set_default("name", "fallback")
    store.load_string("name=piyo\nage=28\nenabled=yes\nempty=")
    return store


def test_to_lines_renders_resolved_table():
    text = StoreExporter().to_lines(_store())
    assert text == "name=piyo\nage=28\nenabled=yes\nempty=\ntimeout=30\n"


def test_to_lines_reloads_to_same_table():
    original = _store()
    reloaded = LineStore()
    reloaded.load_string(StoreExporter().to_lines(original))
    assert reloaded.values == original.resolved()


def test_to_yaml_keeps_values_as_strings():
    """Values that look like ints or booleans stay strings after a safe load."""
    store = _store()
    text = StoreExporter().to_yaml(store)
    loaded = YAML(typ="safe").load(text)
    assert loaded == store.resolved()
    assert loaded["age"] == "28"
    assert loaded["enabled"] == "yes"


def test_to_yaml_marks_default_entries():
    text = StoreExporter().to_yaml(_store())
    timeout_line = next(line for line in text.splitlines() if line.startswith("timeout"))
    assert timeout_line.rstrip().endswith("# default")
    name_line = next(line for line in text.splitlines() if line.startswith("name"))
    assert "# default" not in name_line


def test_to_yaml_empty_store():
    assert StoreExporter().to_yaml(LineStore()) == ""


def test_to_lines_skips_pairs_that_would_not_reload():
    """Defaults with unwritable names are left out instead of reloading as something else."""
    store = LineStore()
    store.set_default("", "x")
    store.set_default("a=b", "c")
    store.set_default("#hidden", "1")
    store.set_default("multi", "one\ntwo")
    store.set_default("ok", "1")

    text = StoreExporter().to_lines(store)
    assert text == "ok=1\n"

    reloaded = LineStore()
    reloaded.load_string(text)
    assert reloaded.values == {"ok": "1"}
