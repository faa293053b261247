from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def request_fixture_path() -> Path:
    return FIXTURES_DIR / "request.json"
