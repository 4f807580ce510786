"""Tests for reading service-registry.yaml."""

from __future__ import annotations

from pathlib import Path

import pytest

from neura_bootstrap.errors import RegistryError
from neura_bootstrap.registry import load_registry

pytestmark = pytest.mark.unit


class TestLoadRegistry:
    def test_loads_records_in_order(self, tmp_path: Path, make_registry, foo_service, bar_service):
        path = make_registry(tmp_path, [foo_service, bar_service])
        registry = load_registry(path)
        assert registry.names() == ["foo", "bar"]
        assert registry.services[0].port == 8080
        assert registry.services[1].path == "services/ai/bar"

    def test_accepts_string_path(self, tmp_path: Path, make_registry, foo_service):
        path = make_registry(tmp_path, [foo_service])
        assert load_registry(str(path)).names() == ["foo"]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text("", encoding="utf-8")
        assert len(load_registry(path)) == 0

    def test_missing_services_key(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text("version: 3\n", encoding="utf-8")
        assert len(load_registry(path)) == 0

    def test_empty_services_list(self, tmp_path: Path, make_registry):
        path = make_registry(tmp_path, [])
        assert len(load_registry(path)) == 0

    def test_other_top_level_keys_ignored(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text(
            "version: 3\n"
            "services:\n"
            "  - name: foo\n"
            "    path: services/foo\n"
            "    language: go\n"
            "    port: 8080\n"
            "    namespace: core\n"
            "    team: x\n",
            encoding="utf-8",
        )
        assert load_registry(path).names() == ["foo"]


class TestLoadRegistryErrors:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(RegistryError, match="file not found"):
            load_registry(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text("services: [\n  - name: foo\n", encoding="utf-8")
        with pytest.raises(RegistryError, match="invalid YAML"):
            load_registry(path)

    def test_top_level_list(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text("- foo\n- bar\n", encoding="utf-8")
        with pytest.raises(RegistryError, match="top level must be a mapping"):
            load_registry(path)

    def test_services_not_a_list(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text("services:\n  foo: bar\n", encoding="utf-8")
        with pytest.raises(RegistryError, match="'services' must be a list"):
            load_registry(path)

    def test_missing_field_reported_with_record(
        self, tmp_path: Path, make_registry, foo_service, bar_service
    ):
        del bar_service["language"]
        path = make_registry(tmp_path, [foo_service, bar_service])
        with pytest.raises(RegistryError) as exc_info:
            load_registry(path)
        message = str(exc_info.value)
        assert "services[1] (bar)" in message
        assert "language" in message
        assert exc_info.value.path == path

    def test_non_mapping_record(self, tmp_path: Path, make_registry):
        path = make_registry(tmp_path, ["just-a-name"])
        with pytest.raises(RegistryError, match=r"services\[0\]"):
            load_registry(path)

    def test_duplicate_names(self, tmp_path: Path, make_registry, foo_service):
        path = make_registry(tmp_path, [foo_service, foo_service])
        with pytest.raises(RegistryError, match="duplicate service names"):
            load_registry(path)

    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_bytes(b"services:\n  - name: \xff\xfe\n")
        with pytest.raises(RegistryError, match="not valid UTF-8") as exc_info:
            load_registry(path)
        assert exc_info.value.path == path

    def test_absolute_path_rejected(self, tmp_path: Path, make_registry, foo_service):
        outside = tmp_path / "outside" / "foo"
        path = make_registry(tmp_path, [{**foo_service, "path": str(outside)}])
        with pytest.raises(RegistryError, match=r"services\[0\] \(foo\): path"):
            load_registry(path)

    def test_parent_reference_in_path_rejected(self, tmp_path: Path, make_registry, foo_service):
        path = make_registry(tmp_path, [{**foo_service, "path": "services/../../outside"}])
        with pytest.raises(RegistryError, match="must not contain '..'"):
            load_registry(path)

    def test_name_with_separators_rejected(self, tmp_path: Path, make_registry, foo_service):
        path = make_registry(tmp_path, [{**foo_service, "name": "../../../escaped"}])
        with pytest.raises(RegistryError, match=r"services\[0\] \(\.\./\.\./\.\./escaped\): name"):
            load_registry(path)


class TestLoadRegistryScalars:
    def test_numeric_values_read_as_text(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text(
            "services:\n"
            "  - name: 123\n"
            "    path: services/123\n"
            "    language: go\n"
            "    port: 8080\n"
            "    namespace: 2024\n"
            "    team: 7\n",
            encoding="utf-8",
        )
        record = load_registry(path).get("123")
        assert record.name == "123"
        assert record.namespace == "2024"
        assert record.team == "7"

    def test_quoted_port_accepted(self, tmp_path: Path):
        path = tmp_path / "service-registry.yaml"
        path.write_text(
            "services:\n"
            "  - name: foo\n"
            "    path: services/foo\n"
            "    language: go\n"
            "    port: '8080'\n"
            "    namespace: core\n"
            "    team: ''\n",
            encoding="utf-8",
        )
        record = load_registry(path).get("foo")
        assert record.port == 8080
        assert record.team == ""
