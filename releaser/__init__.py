"""
Release Build System

Builds a Cargo project for each declared target and packages the
binaries into version-stamped release artifacts.
"""

from .config import BuildTarget, ReleaseConfig, DEFAULT_TARGETS, KNOWN_TARGETS
from .errors import (
    ReleaseError,
    ManifestVersionMissing,
    ManifestFieldMissing,
    BuildFailure,
    ArtifactNotFound,
    PackagingError,
)
from .logger import Logger
from .version import resolve_version, resolve_project_name
from .executor import BuildExecutor, run_release
from .packager import Artifact, ArtifactPackager, artifact_name

__all__ = [
    "BuildTarget",
    "ReleaseConfig",
    "DEFAULT_TARGETS",
    "KNOWN_TARGETS",
    "ReleaseError",
    "ManifestVersionMissing",
    "ManifestFieldMissing",
    "BuildFailure",
    "ArtifactNotFound",
    "PackagingError",
    "Logger",
    "resolve_version",
    "resolve_project_name",
    "BuildExecutor",
    "run_release",
    "Artifact",
    "ArtifactPackager",
    "artifact_name",
]

__version__ = "1.0.0"
