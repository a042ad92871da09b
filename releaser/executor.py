"""
Build executor for multi-target Cargo release builds.
"""
import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import BuildTarget, ReleaseConfig
from .errors import BuildFailure
from .logger import Logger
from .packager import Artifact, ArtifactPackager
from .version import resolve_project_name, resolve_version


class BuildExecutor:
    """Runs cargo once per target, strictly in order."""

    def __init__(
        self,
        config: ReleaseConfig,
        logger: Logger,
        base_env: Optional[Dict[str, str]] = None,
    ):
        self.config = config
        self.logger = logger
        # Snapshot; per-target overrides are layered on a copy of this
        self.base_env = dict(os.environ if base_env is None else base_env)

    def build_command(self, target: BuildTarget) -> List[str]:
        return [self.config.cargo] + target.cargo_args(self.config.release)

    def build_env(self, target: BuildTarget) -> Dict[str, str]:
        """Environment for one target's build, overrides included."""
        env = dict(self.base_env)
        env.update(target.env)
        return env

    def build_target(self, target: BuildTarget):
        """Build for a specific target.

        Toolchain output is passed straight through to the terminal; only the
        exit status decides success.

        Raises:
            BuildFailure: if cargo exits nonzero or cannot be started.
        """
        cmd = self.build_command(target)
        env = self.build_env(target)

        self.logger.info(f"Building for {target.triple}...")
        for key, value in target.env.items():
            self.logger.debug(f"  {key}={value}")
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, cwd=self.config.project_root, env=env)
        except OSError as e:
            raise BuildFailure(target, 127, str(e)) from e

        if result.returncode != 0:
            raise BuildFailure(target, result.returncode)

        self.logger.success(f"Built: {target.friendly_name}")

    def build_all(self, targets: Sequence[BuildTarget]):
        """Build all targets; the first failure aborts the rest."""
        total = len(targets)
        for i, target in enumerate(targets, 1):
            self.logger.step(i, total, f"Building {target.friendly_name}")
            self.build_target(target)


def run_release(config: ReleaseConfig, logger: Logger) -> List[Artifact]:
    """
    Run the whole pipeline: resolve version, build every target, package.

    Args:
        config: Release configuration
        logger: Logger instance

    Returns:
        The artifacts created, one per target, in target order

    Raises:
        ReleaseError: on the first failure of any stage
    """
    manifest_path = config.manifest_path
    version = resolve_version(manifest_path)
    project = config.project_name or resolve_project_name(manifest_path)
    binary_name = config.binary_name or project

    logger.info(f"Building {project} v{version}...")
    logger.info(f"Building for {len(config.targets)} target(s):")
    for target in config.targets:
        logger.target(target.friendly_name, target.triple)
    logger.newline()

    executor = BuildExecutor(config, logger)
    executor.build_all(config.targets)

    logger.newline()
    logger.info("Preparing artifacts...")
    packager = ArtifactPackager(
        project=project,
        version=version,
        binary_name=binary_name,
        target_dir=config.target_path,
        output_dir=config.output_path,
        logger=logger,
        profile=config.profile,
    )
    artifacts = packager.package_all(config.targets)
    if config.prune:
        packager.prune_stale(config.targets)

    logger.success(f"Build complete! Binaries are in {_display_path(config.output_path, config.project_root)}/")
    logger.results(packager.listing())
    return artifacts


def _display_path(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path
