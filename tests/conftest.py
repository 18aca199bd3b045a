import logging
import sys

import pytest


# Modules that snapshot environment variables at import time
_STATEFUL_PREFIXES = ("env", "logger", "bootstrap", "livelistarr", "cli", "auth")


def _purge_modules() -> None:
    for mod in list(sys.modules):
        if mod.split(".", 1)[0] in _STATEFUL_PREFIXES:
            sys.modules.pop(mod, None)


@pytest.fixture(autouse=True)
def clean_env_and_modules(monkeypatch, tmp_path):
    """
    Ensure tests don't leak env, logger state, or cached path resolution.
    """
    import os

    for k in list(os.environ):
        if k.startswith("LIVELISTARR_") or k.startswith("YT_"):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_RETENTION", raising=False)

    # Keep logs / tokens out of the project tree
    monkeypatch.setenv("LIVELISTARR_LOGS_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LIVELISTARR_AUTH_DIR", str(tmp_path / "auth"))
    monkeypatch.setenv("LIVELISTARR_RUN_ID", "test-run")

    root = logging.getLogger()
    saved_level = root.level
    for h in list(root.handlers):
        root.removeHandler(h)

    _purge_modules()

    api_manager = sys.modules.get("providers.youtube.api_manager")
    if api_manager is not None:
        api_manager.reset_oauth_exhausted()

    yield

    for h in list(root.handlers):
        root.removeHandler(h)
        if isinstance(h, logging.FileHandler):
            h.close()
    root.setLevel(saved_level)
