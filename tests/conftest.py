"""Shared fixtures for the Público feed test suite."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from config import load_settings  # noqa: E402


@pytest.fixture
def settings():
    """Settings loaded from the bundled settings/publico.yaml."""
    return load_settings()


@pytest.fixture
def make_raw():
    """Factory fixture for raw API records with sensible defaults."""
    def _make(**overrides):
        raw = {
            "titulo": "Governo aprova <em>novo</em> orçamento",
            "lead": "O Conselho de Ministros aprovou a proposta.",
            "descricao": "há 3 horas ... Texto real",
            "body": "<p>Primeiro parágrafo.</p><p>Segundo parágrafo.</p>",
            "data": "2024-05-10T14:30:00",
            "autores": [{"nome": "Ana Silva"}, "José Costa"],
            "tags": ["Política", {"nome": "Orçamento"}],
            "multimediaPrincipal": "https://imagens.publico.pt/foto.jpg",
            "url": "https://www.publico.pt/2024/05/10/politica/noticia/governo-aprova-orcamento-2090001",
        }
        raw.update(overrides)
        return {k: v for k, v in raw.items() if v is not ...}
    return _make
