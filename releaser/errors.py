"""
Errors raised by the release pipeline.

Every error is fatal: the CLI reports the failing stage and exits with
``exit_code``.
"""
from pathlib import Path

from .config import BuildTarget


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class ReleaseError(Exception):
    """Base class for pipeline failures."""

    stage = "release"
    exit_code = EXIT_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ManifestVersionMissing(ReleaseError):
    """The manifest declares no usable version."""

    stage = "version"

    def __init__(self, manifest_path: Path, reason: str = "no version field"):
        super().__init__(f"Failed to detect version from {manifest_path}: {reason}")
        self.manifest_path = manifest_path
        self.reason = reason


class ManifestFieldMissing(ReleaseError):
    """A manifest field other than the version is absent."""

    stage = "version"

    def __init__(self, manifest_path: Path, field: str):
        super().__init__(f"Field '{field}' not found in {manifest_path}")
        self.manifest_path = manifest_path
        self.field = field


class BuildFailure(ReleaseError):
    """The toolchain exited nonzero (or could not start) for a target."""

    stage = "build"

    def __init__(self, target: BuildTarget, returncode: int, detail: str = ""):
        message = f"Build failed for {target.friendly_name} ({target.triple}), exit status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.target = target
        self.returncode = returncode


class ArtifactNotFound(ReleaseError):
    """A target built successfully but its binary is not where expected."""

    stage = "package"

    def __init__(self, target: BuildTarget, path: Path):
        super().__init__(f"Binary for {target.friendly_name} not found at {path}")
        self.target = target
        self.path = path


class PackagingError(ReleaseError):
    """The output directory or an artifact file could not be written."""

    stage = "package"
