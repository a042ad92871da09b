import pytest

from releaser.errors import ManifestFieldMissing, ManifestVersionMissing
from releaser.version import load_manifest, read_manifest_field, resolve_project_name, resolve_version


def write_manifest(tmp_path, text):
    path = tmp_path / "Cargo.toml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize("version", ["0.1.0", "1.2.3", "2.0.0-rc.1", "1.0.0+build.5"])
def test_resolve_version_returns_declared_value(tmp_path, version):
    path = write_manifest(tmp_path, f'[package]\nname = "app"\nversion = "{version}"\n')
    assert resolve_version(path) == version


def test_package_version_preferred_over_workspace(tmp_path):
    path = write_manifest(
        tmp_path,
        '[package]\nversion = "0.3.0"\n\n[workspace.package]\nversion = "9.9.9"\n',
    )
    assert resolve_version(path) == "0.3.0"


def test_dependency_versions_are_ignored(tmp_path):
    path = write_manifest(
        tmp_path,
        '[package]\nname = "app"\nrust-version = "1.70"\n\n'
        '[dependencies]\nserde = { version = "1.0" }\n',
    )
    with pytest.raises(ManifestVersionMissing):
        resolve_version(path)


def test_spacing_around_equals(tmp_path):
    path = write_manifest(tmp_path, '[package]\nversion="0.2.0"\n')
    assert resolve_version(path) == "0.2.0"


def test_missing_version_names_manifest(tmp_path):
    path = write_manifest(tmp_path, '[package]\nname = "app"\n')
    with pytest.raises(ManifestVersionMissing) as excinfo:
        resolve_version(path)
    assert "Cargo.toml" in str(excinfo.value)
    assert excinfo.value.manifest_path == path


def test_empty_version(tmp_path):
    path = write_manifest(tmp_path, '[package]\nversion = ""\n')
    with pytest.raises(ManifestVersionMissing, match="empty"):
        resolve_version(path)


@pytest.mark.parametrize("version", ["1.0/evil", "1.0 beta", "../1.0"])
def test_version_unusable_in_file_name(tmp_path, version):
    path = write_manifest(tmp_path, f'[package]\nversion = "{version}"\n')
    with pytest.raises(ManifestVersionMissing, match="invalid version"):
        resolve_version(path)


def test_manifest_not_found(tmp_path):
    with pytest.raises(ManifestVersionMissing, match="manifest not found"):
        resolve_version(tmp_path / "Cargo.toml")


def test_read_manifest_field_absent(tmp_path):
    path = write_manifest(tmp_path, "[package]\n")
    assert read_manifest_field(load_manifest(path), "name") is None


def test_resolve_project_name(tmp_path):
    path = write_manifest(tmp_path, '[package]\nname = "hyprdrover"\nversion = "0.1.0"\n')
    assert resolve_project_name(path) == "hyprdrover"


def test_resolve_project_name_missing(tmp_path):
    path = write_manifest(tmp_path, '[package]\nversion = "0.1.0"\n')
    with pytest.raises(ManifestFieldMissing):
        resolve_project_name(path)


def test_literal_string_version(tmp_path):
    path = write_manifest(tmp_path, "[package]\nname = 'app'\nversion = '0.1.0'\n")
    assert resolve_version(path) == "0.1.0"


def test_indented_keys(tmp_path):
    path = write_manifest(tmp_path, '[package]\n  name = "app"\n  version = "0.1.0"\n')
    assert resolve_version(path) == "0.1.0"


def test_inherited_version_comes_from_workspace(tmp_path):
    path = write_manifest(
        tmp_path,
        '[workspace.package]\nversion = "0.4.2"\n\n'
        '[package]\nname = "app"\nversion.workspace = true\n\n'
        '[dependencies.serde]\nversion = "1.0"\n',
    )
    assert resolve_version(path) == "0.4.2"


def test_dependency_table_version_not_used(tmp_path):
    path = write_manifest(
        tmp_path,
        '[package]\nname = "app"\nversion.workspace = true\n\n'
        '[dependencies.serde]\nversion = "1.0"\n',
    )
    with pytest.raises(ManifestVersionMissing, match="no version field"):
        resolve_version(path)


def test_invalid_toml(tmp_path):
    path = write_manifest(tmp_path, '[package\nversion = "0.1.0"\n')
    with pytest.raises(ManifestVersionMissing, match="invalid TOML"):
        resolve_version(path)
