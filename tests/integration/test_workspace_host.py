# tests/integration/test_workspace_host.py
"""
End-to-end tests for the Workspace host: discovery, module files,
inheritance and incremental emission.
"""

import json
import sys

import pytest

from water_workspace.core.exceptions import (
    InheritanceCycleError,
    ModuleFileError,
    UnknownModuleError,
    UnknownStandardPinError,
    WaterError,
)
from water_workspace.pins.emission import EmissionStatus
from water_workspace.workspace.host import DEFAULT_VERSION, Workspace

ISSUER = "it.water.integration.authentication-issuer"
JDBC = "it.water.persistence.jdbc"


def _configured(root):
    workspace = Workspace(root)
    workspace.configure()
    return workspace


class TestConfigure:
    """Module registration and metadata."""

    def test_modules_registered_root_first(self, user_workspace):
        workspace = _configured(user_workspace)
        assert [m.address for m in workspace.modules] == ["", "User-api", "User-model", "User-service"]

    def test_excluded_dirs_not_registered(self, user_workspace):
        workspace = _configured(user_workspace)
        assert all("build" not in m.address for m in workspace.modules)
        assert len(workspace.discovery.skipped_dirs) == 1

    def test_coordinates_inherit_root_group_and_version(self, user_workspace):
        workspace = _configured(user_workspace)
        assert str(workspace.get(":User-service").coordinate) == "it.water:User-service:1.0.0"
        assert str(workspace.get("User-api").coordinate) == "it.water:User-api:1.0.0"

    def test_module_without_descriptor_disabled(self, user_workspace):
        workspace = _configured(user_workspace)
        assert workspace.get(":User-model").descriptor.enabled is False
        assert workspace.get(":").descriptor.enabled is False

    def test_inherits_from_linked(self, user_workspace):
        workspace = _configured(user_workspace)
        service = workspace.get(":User-service")
        assert service.descriptor.inherited == (workspace.get(":User-api").descriptor,)

    def test_configure_twice_is_a_no_op(self, user_workspace):
        workspace = _configured(user_workspace)
        workspace.configure()
        assert len(workspace.modules) == 4

    def test_include_is_idempotent(self, user_workspace):
        workspace = _configured(user_workspace)
        assert workspace.include(":User-api") is workspace.get("User-api")

    def test_get_unknown(self, user_workspace):
        workspace = _configured(user_workspace)
        with pytest.raises(UnknownModuleError, match="nope"):
            workspace.get(":nope")

    def test_defaults_without_root_module_file(self, tmp_path, write_module):
        write_module("X", waterDescriptor={"moduleId": "it.water.x"})
        workspace = _configured(tmp_path)

        project = workspace.get(":X")
        assert project.group == ""
        assert project.artifact_id == "X"
        assert project.version == DEFAULT_VERSION

    def test_parent_of(self, tmp_path, write_module):
        write_module("A", name="A")
        write_module("A/B", name="B")
        write_module("X/Y", name="Y")
        workspace = _configured(tmp_path)

        assert workspace.parent_of(workspace.get(":A:B")).address == "A"
        assert workspace.parent_of(workspace.get(":X:Y")).address == ""
        assert workspace.parent_of(workspace.get(":")) is None


class TestConfigureErrors:
    def test_unknown_inherits_from(self, tmp_path, write_module):
        write_module("A", waterDescriptor={"moduleId": "a", "inheritsFrom": [":missing"]})
        with pytest.raises(UnknownModuleError) as exc_info:
            _configured(tmp_path)
        assert exc_info.value.address == ":missing"
        assert exc_info.value.referenced_by == ":A"

    def test_unknown_standard_pin(self, tmp_path, write_module):
        write_module("A", waterDescriptor={"moduleId": "a", "output": [{"standardPin": "redis"}]})
        with pytest.raises(UnknownStandardPinError, match="redis"):
            _configured(tmp_path)

    def test_invalid_module_file(self, tmp_path, write_module):
        write_module("A", waterDescriptor={"moduleId": "a", "output": [{"pin": "x", "standardPin": "jdbc"}]})
        with pytest.raises(ModuleFileError):
            _configured(tmp_path)


class TestFinalize:
    """Rendering and emission."""

    def test_emits_enabled_modules_only(self, user_workspace):
        workspace = _configured(user_workspace)
        results = workspace.finalize()

        assert [r.artifact.coordinate.artifact_id for r in results] == ["User-api", "User-service"]
        assert all(r.status is EmissionStatus.WRITTEN for r in results)
        assert not (workspace.root / "User-model" / "build").exists()

    def test_descriptor_content(self, user_workspace):
        workspace = _configured(user_workspace)
        workspace.finalize()

        path = workspace.root / "User-service" / "build" / "water" / "User-service-1.0.0.water.json"
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["artifactId"] == "it.water:User-service:1.0.0"
        assert data["moduleId"] == "it.water.user"
        assert data["displayName"] == "User Service"
        assert [p["key"] for p in data["properties"]] == ["it.water.user.registration.enabled"]
        # Inherited output first, own jdbc (extended) after
        assert [p["id"] for p in data["pins"]["output"]] == [ISSUER, JDBC]
        assert data["pins"]["output"][1]["properties"][-1]["key"] == "db.schema"
        assert data["pins"]["input"] == [{"id": "it.water.api-gateway", "required": True}]

    def test_render_matches_file(self, user_workspace):
        workspace = _configured(user_workspace)
        (api, _) = workspace.finalize()
        assert workspace.render(":User-api") == api.output_file.read_text(encoding="utf-8")

    def test_render_disabled_module(self, user_workspace):
        workspace = _configured(user_workspace)
        with pytest.raises(WaterError, match="moduleId"):
            workspace.render(":User-model")

    def test_render_before_configure(self, user_workspace):
        with pytest.raises(WaterError, match="configure"):
            Workspace(user_workspace).render(":User-api")

    def test_second_run_up_to_date(self, user_workspace):
        _configured(user_workspace).finalize()

        results = _configured(user_workspace).finalize()
        assert [r.status for r in results] == [EmissionStatus.UP_TO_DATE, EmissionStatus.UP_TO_DATE]
        assert (user_workspace / ".water" / "descriptor-cache.json").exists()

    def test_only_changed_module_rewritten(self, user_workspace, write_module):
        _configured(user_workspace).finalize()
        write_module(
            "User-api",
            name="User-api",
            waterDescriptor={
                "moduleId": "it.water.user.api",
                "displayName": "User API (renamed)",
                "output": [{"standardPin": "authentication-issuer"}],
            },
        )

        results = {r.artifact.coordinate.artifact_id: r.status for r in _configured(user_workspace).finalize()}
        assert results == {"User-api": EmissionStatus.WRITTEN, "User-service": EmissionStatus.UP_TO_DATE}

    def test_inherited_change_propagates(self, user_workspace, write_module):
        _configured(user_workspace).finalize()
        write_module(
            "User-api",
            name="User-api",
            waterDescriptor={
                "moduleId": "it.water.user.api",
                "displayName": "User API",
                "output": [{"standardPin": "authentication-issuer"}, {"standardPin": "service-discovery"}],
            },
        )

        results = _configured(user_workspace).finalize()
        assert all(r.written for r in results)

    def test_force(self, user_workspace):
        _configured(user_workspace).finalize()
        results = _configured(user_workspace).finalize(force=True)
        assert all(r.written for r in results)

    def test_cycle_detected_at_finalize(self, tmp_path, write_module):
        write_module("A", waterDescriptor={"moduleId": "a", "inheritsFrom": [":B"]})
        write_module("B", waterDescriptor={"moduleId": "b", "inheritsFrom": ["B"]})
        workspace = _configured(tmp_path)

        with pytest.raises(InheritanceCycleError, match=":B -> :B"):
            workspace.finalize()

    def test_workspace_config_override(self, user_workspace):
        config_dir = user_workspace / ".water"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("workspace:\n  build_dir: out\n", encoding="utf-8")

        workspace = _configured(user_workspace)
        workspace.finalize()
        assert (workspace.root / "User-api" / "out" / "water" / "User-api-1.0.0.water.json").exists()


class TestRobustness:
    """Partial failures and unusual layouts."""

    def test_written_descriptors_cached_when_a_later_module_fails(self, tmp_path, write_module):
        write_module("A", name="A", version="1", group="g", waterDescriptor={"moduleId": "a"})
        write_module("B", name="B", version="1", group="g", waterDescriptor={"moduleId": "b", "inheritsFrom": [":C"]})
        write_module("C", name="C", version="1", group="g", waterDescriptor={"moduleId": "c", "inheritsFrom": [":B"]})

        with pytest.raises(InheritanceCycleError):
            _configured(tmp_path).finalize()
        assert (tmp_path / "A" / "build" / "water" / "A-1.water.json").exists()

        write_module("C", name="C", version="1", group="g", waterDescriptor={"moduleId": "c"})
        results = {str(r.artifact.coordinate): r.status for r in _configured(tmp_path).finalize()}

        assert results == {
            "g:A:1": EmissionStatus.UP_TO_DATE,
            "g:B:1": EmissionStatus.WRITTEN,
            "g:C:1": EmissionStatus.WRITTEN,
        }

    def test_invalid_utf8_module_file(self, tmp_path):
        (tmp_path / "A").mkdir()
        (tmp_path / "A" / "water.yaml").write_bytes(b"description: \xff\xfe bad\n")

        with pytest.raises(ModuleFileError, match="Invalid UTF-8"):
            _configured(tmp_path)

    def test_empty_module_id_still_emits(self, tmp_path, write_module):
        write_module("A", name="A", waterDescriptor={"moduleId": ""})
        (result,) = _configured(tmp_path).finalize()
        assert json.loads(result.output_file.read_text(encoding="utf-8"))["moduleId"] == ""

    @pytest.mark.skipif(sys.platform == "win32", reason="':' is not allowed in Windows file names")
    def test_directory_name_containing_separator(self, tmp_path, write_module):
        write_module("a:b", name="ab", waterDescriptor={"moduleId": "it.water.ab"})
        workspace = _configured(tmp_path)

        project = workspace.get(":a:b")
        assert project.directory == workspace.root / "a:b"
        assert project.module_file == workspace.root / "a:b" / "water.yaml"
        assert project.descriptor.module_id == "it.water.ab"

    def test_render_masks_sensitive_on_request(self, tmp_path, write_module):
        write_module(
            "A",
            name="A",
            waterDescriptor={
                "moduleId": "a",
                "properties": [{"key": "pw", "sensitive": True, "defaultValue": "s3cret"}],
            },
        )
        workspace = _configured(tmp_path)

        assert "s3cret" not in workspace.render(":A", mask_sensitive=True)
        assert "s3cret" in workspace.render(":A")
