"""Позволяет запускать утилиту как ``python -m runlike``."""

from __future__ import annotations

import sys

from runlike.main import main

if __name__ == "__main__":
    sys.exit(main())
