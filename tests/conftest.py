"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local gosubtest package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of gosubtest modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("gosubtest"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's global config and GOSUBTEST__* env out of tests."""
    from gosubtest.config import loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "no-global-config.yaml")
    for key in list(os.environ):
        if key.upper().startswith("GOSUBTEST__"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo configure_logging so handlers never outlive the test that added them."""
    yield
    import structlog

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()
