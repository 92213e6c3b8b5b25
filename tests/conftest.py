"""
Fixtures pytest partagees pour les tests fanartapi.

Ce module contient les fixtures communes utilisees dans les tests:
- Cle API de test
- Environnement isole (variables FANARTAPI_*, .env, etat loguru)
"""

from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

ENV_VARS = ("API_KEY", "CLIENT_KEY", "LOG_LEVEL", "LOG_FILE")


@pytest.fixture
def api_key() -> str:
    """Cle API de test."""
    return "test-api-key-12345"


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """
    Isole un test de l'environnement de la machine.

    Supprime les variables FANARTAPI_*, se place dans un repertoire temporaire
    (aucun .env lu) et remet loguru dans son etat initial a la fin du test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(f"FANARTAPI_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    logger.remove()
    logger.disable("fanartapi")
