#!/usr/bin/env python3
"""
Allow running the suite tooling as a module: python -m nepthic_e2e

This enables the following usage:
    python -m nepthic_e2e [OPTIONS] COMMAND

Which is equivalent to:
    nepthic-e2e [OPTIONS] COMMAND
"""

from nepthic_e2e.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
