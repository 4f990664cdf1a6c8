"""
Manifest Store (manifest.py)

Tests ManifestEntry, ManifestStore, load_manifest.
"""

import pytest

from vitebridge.faults import ConfigurationError, ManifestParseError
from vitebridge.manifest import ManifestEntry, ManifestStore, load_manifest

from tests.conftest import SAMPLE_MANIFEST, write_manifest


# ============================================================================
# ManifestEntry
# ============================================================================

class TestManifestEntry:

    def test_from_dict_full(self):
        entry = ManifestEntry.from_dict("src/main.js", SAMPLE_MANIFEST["src/main.js"])
        assert entry.path == "src/main.js"
        assert entry.file == "assets/main-4f2a.js"
        assert entry.name == "main"
        assert entry.imports == ("src/shared.js",)
        assert entry.dynamic_imports == ("src/lazy.js",)
        assert entry.css == ("assets/main-91bc.css",)
        assert entry.is_entry is True

    def test_from_dict_minimal(self):
        entry = ManifestEntry.from_dict("src/a.js", {"file": "assets/a.js"})
        assert entry.name is None
        assert entry.imports == ()
        assert entry.dynamic_imports == ()
        assert entry.css == ()
        assert entry.is_entry is False

    def test_frozen(self):
        entry = ManifestEntry.from_dict("src/a.js", {"file": "assets/a.js"})
        with pytest.raises(AttributeError):
            entry.file = "other.js"

    def test_missing_file(self):
        with pytest.raises(ValueError, match="no 'file'"):
            ManifestEntry.from_dict("src/a.js", {"name": "a"})

    def test_imports_must_be_strings(self):
        with pytest.raises(ValueError, match="imports"):
            ManifestEntry.from_dict("src/a.js", {"file": "a.js", "imports": [1, 2]})

    def test_to_dict(self):
        entry = ManifestEntry.from_dict("src/main.js", SAMPLE_MANIFEST["src/main.js"])
        assert entry.to_dict() == SAMPLE_MANIFEST["src/main.js"]


# ============================================================================
# ManifestStore
# ============================================================================

class TestManifestStore:

    def test_mapping(self):
        store = ManifestStore.from_dict(SAMPLE_MANIFEST)
        assert len(store) == 4
        assert "src/shared.js" in store
        assert store["src/shared.js"].file == "assets/shared-77aa.js"

    def test_missing_key_is_not_an_error(self):
        store = ManifestStore.from_dict(SAMPLE_MANIFEST)
        assert store.get("src/nope.js") is None

    def test_read_only(self):
        store = ManifestStore.from_dict(SAMPLE_MANIFEST)
        with pytest.raises(TypeError):
            store["src/new.js"] = store["src/main.js"]

    def test_entries(self):
        store = ManifestStore.from_dict(SAMPLE_MANIFEST)
        assert [e.path for e in store.entries()] == ["src/main.js", "src/admin.css"]

    def test_empty(self):
        store = ManifestStore.from_dict({})
        assert len(store) == 0

    def test_top_level_must_be_object(self):
        with pytest.raises(ManifestParseError):
            ManifestStore.from_dict(["src/a.js"])

    def test_bad_entry(self):
        with pytest.raises(ManifestParseError, match="src/a.js"):
            ManifestStore.from_dict({"src/a.js": "assets/a.js"})


# ============================================================================
# load_manifest
# ============================================================================

class TestLoadManifest:

    def test_load(self, tmp_path):
        path = write_manifest(tmp_path, SAMPLE_MANIFEST)
        store = load_manifest(path)
        assert store.source == path
        assert store["src/main.js"].name == "main"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_manifest(tmp_path / "missing.json")
        assert exc_info.value.code == "MANIFEST_MISSING"

    def test_directory_is_missing(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_manifest(tmp_path)

    def test_invalid_json(self, tmp_path):
        path = write_manifest(tmp_path, "{not json")
        with pytest.raises(ManifestParseError) as exc_info:
            load_manifest(path)
        assert exc_info.value.code == "MANIFEST_PARSE_ERROR"

    def test_parse_error_is_not_configuration_error(self, tmp_path):
        path = write_manifest(tmp_path, "[]")
        with pytest.raises(ManifestParseError):
            load_manifest(path)
        assert not issubclass(ManifestParseError, ConfigurationError)
