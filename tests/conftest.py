"""Shared fixtures: a small raw batch in the shape the LLM returns."""

from typing import Any

import pytest

from praia_news.models import RawBatch


def raw_batch_payload() -> dict[str, Any]:
    return {
        "dataColeta": "2025-11-16T14:30:00+00:00",
        "totalNoticias": 3,
        "noticias": [
            {
                "titulo": "Prefeitura anuncia nova ciclovia na orla",
                "resumo": "A Prefeitura de Praia Grande anunciou a construção de 5 km de ciclovia ao longo da orla.",
                "categoria": "Infraestrutura",
                "relevancia": "média",
                "fonte": "Prefeitura de Praia Grande",
                "dataPublicacao": "2025-11-16",
                "engagementScore": 72,
            },
            {
                "titulo": "Festival de Verão 2025 confirma atrações",
                "resumo": "O Festival de Verão terá shows gratuitos na praia do Boqueirão durante três fins de semana.",
                "categoria": "Cultura",
                "relevancia": "alta",
                "fonte": "A Tribuna",
                "url": "https://example.com/festival-verao",
                "dataPublicacao": "2025-11-16",
                "engagementScore": 85,
            },
            {
                "titulo": "Operação Verão reforça policiamento",
                "resumo": "A Polícia Militar amplia o efetivo nas praias durante a temporada.",
                "categoria": "Segurança",
                "relevancia": "alta",
                "fonte": "G1 Santos",
                "dataPublicacao": "2025-11-15",
                "engagementScore": 68,
            },
        ],
        "temasEmDestaque": ["Verão 2025", "Mobilidade", "Segurança"],
        "sugestoesPautas": ["Impacto da ciclovia no comércio", "Guia do Festival de Verão"],
    }


@pytest.fixture()
def raw_payload() -> dict[str, Any]:
    return raw_batch_payload()


@pytest.fixture()
def raw_batch() -> RawBatch:
    return RawBatch.model_validate(raw_batch_payload())
