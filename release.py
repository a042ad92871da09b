#!/usr/bin/env python3
"""
Release build script.

Builds the Cargo project in the current directory for every declared
target and copies the binaries into artifacts/.

Usage:
    python release.py [options]
"""

import sys
from pathlib import Path

# Add script directory to path
script_dir = Path(__file__).parent
sys.path.insert(0, str(script_dir))

from releaser.cli import main


if __name__ == "__main__":
    sys.exit(main())
