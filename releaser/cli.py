"""
Command line entry point for the release build.

Usage:
    python release.py [options]

Examples:
    python release.py                  # Build all targets and package them
    python release.py --prune          # Also drop artifacts of older versions
    python release.py -v --no-color    # Verbose, plain output
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import ReleaseConfig
from .errors import EXIT_INTERRUPTED, EXIT_SUCCESS, ReleaseError
from .executor import run_release
from .logger import Logger


def print_banner():
    """Print the release script banner."""
    print()
    print("=" * 50)
    print("  Release Build")
    print("  Multi-Target Packaging")
    print("=" * 50)
    print()


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Build release binaries for every target and package them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                    Build all targets into artifacts/
  %(prog)s --prune            Remove artifacts of other versions first
  %(prog)s --project-root ..  Run against another checkout

Targets (built in this order):
  linux-x86_64    Host build (target/release)
  linux-aarch64   Cross build, linker aarch64-linux-gnu-gcc

Artifacts are named {project}-v{version}-{os}-{arch}.
""",
    )

    # Release options
    release_group = parser.add_argument_group("Release")
    release_group.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory containing Cargo.toml (default: current directory)",
    )
    release_group.add_argument(
        "--prune",
        action="store_true",
        help="Remove this project's artifacts from other versions before packaging",
    )

    # Other options
    other_group = parser.add_argument_group("Other Options")
    other_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    other_group.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    print_banner()

    logger = Logger(
        use_color=not args.no_color,
        verbose=args.verbose,
    )

    project_root = (args.project_root or Path.cwd()).resolve()
    config = ReleaseConfig(
        project_root=project_root,
        prune=args.prune,
    )

    logger.info(f"Host: {config.host_os}-{config.host_arch}")
    logger.info(f"Project: {project_root}")
    logger.newline()

    try:
        run_release(config, logger)
    except ReleaseError as e:
        logger.error(f"{e.stage}: {e.message}")
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
