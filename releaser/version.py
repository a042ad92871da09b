"""
Version and project name lookup from the Cargo manifest.
"""
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ManifestFieldMissing, ManifestVersionMissing

# Must be usable verbatim inside an artifact file name
VERSION_PATTERN = re.compile(r"^[0-9A-Za-z][0-9A-Za-z.+_-]*$")


def load_manifest(manifest_path: Path) -> Dict[str, Any]:
    """Parse the manifest.

    Raises:
        ManifestVersionMissing: if the file is missing or not valid TOML.
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise ManifestVersionMissing(manifest_path, "manifest not found")
    try:
        with open(manifest_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestVersionMissing(manifest_path, f"invalid TOML: {e}") from e


def read_manifest_field(manifest: Dict[str, Any], field: str) -> Optional[str]:
    """Return ``package.<field>``, falling back to ``workspace.package.<field>``.

    Inherited values (``version.workspace = true``) and other non-string
    values count as absent at that level.
    """
    candidates = [
        manifest.get("package", {}).get(field),
        manifest.get("workspace", {}).get("package", {}).get(field),
    ]
    for value in candidates:
        if isinstance(value, str):
            return value
    return None


def resolve_version(manifest_path: Path) -> str:
    """Read the release version from the manifest.

    Raises:
        ManifestVersionMissing: if the manifest is missing or unparsable,
            declares no version, or the version cannot be used in a file name.
    """
    manifest_path = Path(manifest_path)
    version = read_manifest_field(load_manifest(manifest_path), "version")
    if version is None:
        raise ManifestVersionMissing(manifest_path, "no version field")

    version = version.strip()
    if not version:
        raise ManifestVersionMissing(manifest_path, "version field is empty")
    if not VERSION_PATTERN.match(version):
        raise ManifestVersionMissing(manifest_path, f"invalid version '{version}'")

    return version


def resolve_project_name(manifest_path: Path) -> str:
    manifest_path = Path(manifest_path)
    manifest = load_manifest(manifest_path) if manifest_path.is_file() else {}
    name = manifest.get("package", {}).get("name")
    if not isinstance(name, str) or not name.strip():
        raise ManifestFieldMissing(manifest_path, "name")
    return name.strip()
