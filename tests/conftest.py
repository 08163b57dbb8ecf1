"""Make scripts/ importable for tests. Shared fixtures and helpers."""

import re
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from yamlsort.config import MODE_ENV, QUOTE_ENV  # noqa: E402

# Rich inserts ANSI bold/color codes that break plain-text assertions in CI.
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's YAMLSORT_* settings out of every test."""
    monkeypatch.delenv(QUOTE_ENV, raising=False)
    monkeypatch.delenv(MODE_ENV, raising=False)


@pytest.fixture()
def manifest():
    """A small deployment-style manifest as parsed data."""
    return {
        "kind": "Deployment",
        "metadata": {"name": "web", "labels": {"tier": "frontend", "app": "web"}},
        "spec": {
            "replicas": 3,
            "containers": [
                {"image": "nginx", "name": "nginx", "ports": [{"port": 80}]},
                {"name": "sidecar", "args": [], "env": {}},
            ],
        },
    }


@pytest.fixture()
def manifest_text():
    """Rendering of the manifest fixture."""
    return (
        "kind: Deployment\n"
        "metadata:\n"
        "  name: web\n"
        "  labels:\n"
        "    app: web\n"
        "    tier: frontend\n"
        "spec:\n"
        "  containers:\n"
        "  - name: nginx\n"
        "    image: nginx\n"
        "    ports:\n"
        "    - port: 80\n"
        "  - name: sidecar\n"
        "    args: []\n"
        "    env: {}\n"
        "  replicas: 3\n"
    )
