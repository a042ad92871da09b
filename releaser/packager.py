"""
Copies built binaries into the artifacts directory under release names.
"""
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from .config import BuildTarget
from .errors import ArtifactNotFound, PackagingError
from .logger import Logger


def artifact_name(project: str, version: str, target: BuildTarget) -> str:
    """Release file name, e.g. ``app-v0.1.0-linux-x86_64``."""
    return f"{project}-v{version}-{target.os_label}-{target.arch_label}"


def format_size(size: float) -> str:
    """Format file size in human-readable format."""
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f}{unit}"
        size /= 1024
    return f"{size:.1f}TB"


@dataclass
class Artifact:
    """A packaged release binary."""

    target: BuildTarget
    source: Path
    destination: Path
    size: int

    @property
    def file_name(self) -> str:
        return self.destination.name

    @property
    def size_str(self) -> str:
        return format_size(self.size)


class ArtifactPackager:
    """Collects per-target binaries into one output directory."""

    def __init__(
        self,
        project: str,
        version: str,
        binary_name: str,
        target_dir: Path,
        output_dir: Path,
        logger: Logger,
        profile: str = "release",
    ):
        self.project = project
        self.version = version
        self.binary_name = binary_name
        self.target_dir = target_dir
        self.output_dir = output_dir
        self.logger = logger
        self.profile = profile

    def source_path(self, target: BuildTarget) -> Path:
        return target.output_path(self.target_dir, self.binary_name, self.profile)

    def destination_path(self, target: BuildTarget) -> Path:
        return self.output_dir / artifact_name(self.project, self.version, target)

    def package(self, target: BuildTarget) -> Artifact:
        """Copy one target's binary into the output directory."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PackagingError(f"Cannot create output directory {self.output_dir}: {e}") from e

        source = self.source_path(target)
        if not source.is_file():
            raise ArtifactNotFound(target, source)

        dest_path = self.destination_path(target)
        try:
            shutil.copy2(source, dest_path)
            dest_path.chmod(0o755)
        except OSError as e:
            raise PackagingError(f"Cannot copy {source} to {dest_path}: {e}") from e

        artifact = Artifact(
            target=target,
            source=source,
            destination=dest_path,
            size=dest_path.stat().st_size,
        )
        self.logger.success(f"Created {dest_path} ({artifact.size_str})")
        return artifact

    def package_all(self, targets: Iterable[BuildTarget]) -> List[Artifact]:
        return [self.package(target) for target in targets]

    def prune_stale(self, targets: Iterable[BuildTarget]) -> List[Path]:
        """Remove this project's artifacts that the current run won't produce.

        Files of other projects in the output directory are left alone.
        """
        if not self.output_dir.is_dir():
            return []

        # {project}-v{version}-{os}-{arch}; "app-viewer-v1.0.0-..." is not ours
        pattern = re.compile(re.escape(self.project) + r"-v[0-9][0-9A-Za-z.+_-]*-[^-]+-[^-]+")
        current = {artifact_name(self.project, self.version, t) for t in targets}
        removed: List[Path] = []
        for path in sorted(self.output_dir.iterdir()):
            if not path.is_file():
                continue
            if pattern.fullmatch(path.name) and path.name not in current:
                try:
                    path.unlink()
                except OSError as e:
                    raise PackagingError(f"Cannot remove stale artifact {path}: {e}") from e
                removed.append(path)
                self.logger.info(f"Removed stale artifact {path.name}")
        return removed

    def listing(self) -> List[Tuple[Path, str]]:
        """Contents of the output directory with sizes, sorted by name."""
        if not self.output_dir.is_dir():
            return []
        return [
            (path, format_size(path.stat().st_size))
            for path in sorted(self.output_dir.iterdir())
            if path.is_file()
        ]
