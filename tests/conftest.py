"""Pytest configuration shared by all tests"""

import os
import pytest
import sys
from pathlib import Path

# Add src/ to path so tests run without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def pets_text():
    """
    Three lines, two terms:
    - "cat" in lines 0 and 1
    - "dog" in lines 0 and 2
    """
    return "cat dog\ncat cat\ndog dog dog"


@pytest.fixture
def notes_text():
    """Mixed-case text with blank, numeric-only and punctuation-only lines"""
    return (
        "\n"
        "Data pipelines move DATA between systems.\n"
        "1234 5678\n"
        "\n"
        "Caching reduces latency.\n"
        "--- *** ---\n"
        "The data cache is warm.\n"
    )


LINERANK_ENV = ("LINERANK_TOP_K", "LINERANK_ENCODING", "LINERANK_LOG_FILE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_linerank_env(monkeypatch):
    """
    Isolate tests from the developer's shell configuration.

    load_dotenv() writes os.environ directly, so values loaded during a
    test are dropped here before monkeypatch restores the originals.
    """
    for name in LINERANK_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in LINERANK_ENV:
        os.environ.pop(name, None)
