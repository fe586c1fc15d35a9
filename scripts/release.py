#!/usr/bin/env python3
"""Prepare for a release.

All additional options are passed to `rooster`. The project root is the
parent of this script's directory.

Requires the `relprep` package to be importable, e.g. after
`pip install -e .` (or `uv pip install -e .`) from the project root.
"""

from pathlib import Path

from relprep.cli.app import main

if __name__ == "__main__":
    main(Path(__file__))
