"""Pytest configuration.

The package uses a flat layout (unitconverter/ at repo root). When pytest runs
without an editable install, the repo root may be missing from sys.path and
`import unitconverter` fails with ModuleNotFoundError.

This conftest puts the repo root on sys.path.
"""

from __future__ import annotations

import sys
from pathlib import Path


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
