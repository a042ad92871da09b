"""
Release configuration for multi-target Cargo builds.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import platform


@dataclass(frozen=True)
class BuildTarget:
    """A single compilation target and where its binary ends up."""

    triple: str
    os_label: str
    arch_label: str
    native: bool = False
    env: Dict[str, str] = field(default_factory=dict)

    @property
    def friendly_name(self) -> str:
        return f"{self.os_label}-{self.arch_label}"

    def cargo_args(self, release: bool = True) -> List[str]:
        """Arguments passed to ``cargo build`` for this target."""
        args = ["build"]
        if release:
            args.append("--release")
        # Host builds use cargo's default target directory layout
        if not self.native:
            args.extend(["--target", self.triple])
        return args

    def output_path(self, target_dir: Path, binary_name: str, profile: str = "release") -> Path:
        """Location cargo writes the binary to for this target."""
        if self.native:
            return target_dir / profile / binary_name
        return target_dir / self.triple / profile / binary_name


def cross_linker_env(triple: str, linker: str) -> Dict[str, str]:
    """Cargo linker override for a cross target."""
    key = "CARGO_TARGET_" + triple.upper().replace("-", "_") + "_LINKER"
    return {key: linker}


# Known targets, keyed by friendly name
KNOWN_TARGETS: Dict[str, BuildTarget] = {
    "linux-x86_64": BuildTarget(
        triple="x86_64-unknown-linux-gnu",
        os_label="linux",
        arch_label="x86_64",
        native=True,
    ),
    "linux-aarch64": BuildTarget(
        triple="aarch64-unknown-linux-gnu",
        os_label="linux",
        arch_label="aarch64",
        env=cross_linker_env("aarch64-unknown-linux-gnu", "aarch64-linux-gnu-gcc"),
    ),
}

# Host first, then cross targets
DEFAULT_TARGETS: Tuple[BuildTarget, ...] = (
    KNOWN_TARGETS["linux-x86_64"],
    KNOWN_TARGETS["linux-aarch64"],
)


@dataclass
class ReleaseConfig:
    """Release pipeline settings."""

    # Paths (relative to project root)
    project_root: Path = field(default_factory=Path.cwd)
    manifest: Path = field(default_factory=lambda: Path("Cargo.toml"))
    target_dir: Path = field(default_factory=lambda: Path("target"))
    output_dir: Path = field(default_factory=lambda: Path("artifacts"))

    # Naming; read from the manifest when unset
    project_name: Optional[str] = None
    binary_name: Optional[str] = None

    # Build settings
    release: bool = True
    prune: bool = False
    cargo: str = "cargo"

    # Target platforms, built in order
    targets: List[BuildTarget] = field(default_factory=lambda: list(DEFAULT_TARGETS))

    @property
    def profile(self) -> str:
        return "release" if self.release else "debug"

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.manifest

    @property
    def target_path(self) -> Path:
        return self.project_root / self.target_dir

    @property
    def output_path(self) -> Path:
        return self.project_root / self.output_dir

    # Host detection
    @property
    def host_arch(self) -> str:
        machine = platform.machine().lower()
        if machine in ("x86_64", "amd64"):
            return "x86_64"
        elif machine in ("aarch64", "arm64"):
            return "aarch64"
        return machine

    @property
    def host_os(self) -> str:
        system = platform.system().lower()
        if system == "darwin":
            return "macos"
        return system

    def __post_init__(self):
        # Convert string paths to Path objects if needed
        if isinstance(self.project_root, str):
            self.project_root = Path(self.project_root)
        if isinstance(self.manifest, str):
            self.manifest = Path(self.manifest)
        if isinstance(self.target_dir, str):
            self.target_dir = Path(self.target_dir)
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
