"""Make ``import chessdex`` resolve to this checkout during test runs.

The suite is often run straight from a clone without ``pip install -e .``;
putting the clone's root first on ``sys.path`` covers that case and also wins
over any other installed ``chessdex``.
"""

from __future__ import annotations

import sys
from pathlib import Path

_CHECKOUT_ROOT: Path = Path(__file__).resolve().parents[1]


def _prefer_checkout() -> None:
    root = str(_CHECKOUT_ROOT)
    if root not in sys.path:
        sys.path.insert(0, root)


_prefer_checkout()
