"""Make ``import mini_ls`` resolve to this checkout during test runs.

Tests build their own directory trees under ``tempfile`` and never rely on
the caller's working directory, so only the import path needs fixing here.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
