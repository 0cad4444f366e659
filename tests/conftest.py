from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def reset_app_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts without a running app singleton."""
    from vizlab.app import app as app_module

    monkeypatch.setattr(app_module, "state", None)
