#!/usr/bin/env python3
"""
Deterministic deployer - main runner script

Usage:
    python run.py hash-content --hex 0x6080...
    python run.py compute-location --salt 1 --file build/Token.bin
"""

from __future__ import annotations

import sys

from deterministic_deployer.cli import main

if __name__ == "__main__":
    sys.exit(main())
