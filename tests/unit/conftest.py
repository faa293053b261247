# tests/unit/conftest.py
"""Fixtures comunes de los tests unitarios.

Aísla la configuración: ni variables `STREAM_EVENTS_*` del desarrollador ni
un `.env` local deben influir en los resultados.
"""

import copy
import json
import logging
import os
from pathlib import Path

import pytest
import structlog

from core import logging_config
from core.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def request_document(request_fixture_path: Path) -> str:
    return request_fixture_path.read_text(encoding="utf-8")


@pytest.fixture
def request_payload(request_document: str) -> dict:
    """Documento ya parseado; cada test recibe una copia propia para mutarla."""
    return copy.deepcopy(json.loads(request_document))


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == logging_config.HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    logging_config._configured = False
