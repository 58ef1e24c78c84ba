import sys
from pathlib import Path

import pytest

# Ensure the clearspeak package is importable for tests
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from clearspeak.engine import IntentEngine  # noqa: E402
from _fakes import FakeEnhancer  # noqa: E402


@pytest.fixture
def engine() -> IntentEngine:
    return IntentEngine()


@pytest.fixture
def fake_enhancer() -> FakeEnhancer:
    return FakeEnhancer()


@pytest.fixture
def engine_with_remote(fake_enhancer: FakeEnhancer) -> IntentEngine:
    return IntentEngine(enhancer=fake_enhancer)
