"""Pytest configuration.

Goal: make `import presssim` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (presssim/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: presssim`.

This conftest ensures repo root is on sys.path and provides the factory-default
press configuration used across tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture()
def default_params():
    from presssim.config import DEFAULT_PARAMS

    return DEFAULT_PARAMS
