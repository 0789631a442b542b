"""LLM news curator.

Asks an LLM (OpenAI by default, or Anthropic) for the last 24 hours of
Praia Grande news as a single JSON object and parses it into a
:class:`RawBatch`. Failures are never retried here: a missing key raises
:class:`ConfigurationError` before any request, provider failures surface as
:class:`UpstreamError`, and unparseable bodies as :class:`MalformedResponseError`.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from praia_news.config import LLMConfig
from praia_news.errors import ConfigurationError, MalformedResponseError, UpstreamError
from praia_news.models import RawBatch

logger = logging.getLogger(__name__)

_SUPPORTED_PROVIDERS: set[str] = {"anthropic", "openai"}
_DEFAULT_API_KEY_ENVS: dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_SEARCH_QUERY = "Praia Grande SP notícias"

SYSTEM_PROMPT = (
    "Você é um assistente especializado em curadoria de conteúdo para blogs. "
    "Retorne sempre respostas em formato JSON válido."
)

_USER_PROMPT = """\
Busque e organize notícias recentes sobre Praia Grande (cidade de São Paulo) das últimas 24 horas.

IMPORTANTE: Faça uma busca web para encontrar notícias ATUAIS. Busque por "{query} {day}" ou similar.

Retorne APENAS um objeto JSON válido no seguinte formato:

{{
  "dataColeta": "{timestamp}",
  "totalNoticias": 5,
  "noticias": [
    {{
      "titulo": "Título da notícia",
      "resumo": "Resumo de 2-3 linhas sobre a notícia",
      "categoria": "Política|Turismo|Infraestrutura|Segurança|Cultura|Economia|Educação|Saúde|Meio Ambiente|Esportes|Outros",
      "relevancia": "alta|média|baixa",
      "fonte": "Nome da fonte (ex: G1 Santos, A Tribuna, Prefeitura de Praia Grande)",
      "dataPublicacao": "{day}",
      "engagementScore": 85
    }}
  ],
  "temasEmDestaque": ["tema1", "tema2", "tema3"],
  "sugestoesPautas": [
    "Sugestão de pauta 1 baseada nas notícias",
    "Sugestão de pauta 2 baseada nas notícias"
  ]
}}

REGRAS:
1. Busque notícias reais e atuais
2. Retorne SOMENTE JSON válido
3. Foque em notícias das últimas 24 horas
4. Priorize fontes confiáveis (G1, Folha, Estadão, jornais locais)
5. Inclua apenas notícias verificáveis com fontes reais
6. Para o campo "url", OMITA o campo ou use null se você não tiver acesso à URL real da notícia. NUNCA invente URLs.

CÁLCULO DO ENGAGEMENT SCORE (0-100):
- Impacto na comunidade local (30 pontos)
- Originalidade e novidade do tema (25 pontos)
- Relevância emocional/apelo humano (20 pontos)
- Potencial de discussão/compartilhamento (15 pontos)
- Urgência/atualidade do tema (10 pontos)
- Alto engajamento (80-100): inaugurações importantes, grandes eventos culturais, segurança, mudanças que afetam muitos moradores
- Médio engajamento (50-79): notícias administrativas, obras em andamento, eventos de médio porte
- Baixo engajamento (0-49): notícias técnicas, rotineiras ou de nicho
"""


def build_user_prompt(query: str, now: datetime) -> str:
    return _USER_PROMPT.format(query=query, day=now.date().isoformat(), timestamp=now.isoformat())


def strip_code_fences(raw: str) -> str:
    """Remove markdown code fences (```json ... ```) the model may wrap its JSON in."""
    cleaned = raw.strip()
    if "```" not in cleaned:
        return cleaned
    lines = [line for line in cleaned.splitlines() if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def parse_batch(raw: str) -> RawBatch:
    """Parse an LLM response body into a :class:`RawBatch`.

    Raises :class:`MalformedResponseError` when the body is not a JSON object
    with a ``noticias`` list.
    """
    cleaned = strip_code_fences(raw)
    if not cleaned:
        raise MalformedResponseError("LLM returned an empty response")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"LLM response is not valid JSON: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("noticias"), list):
        raise MalformedResponseError("LLM response must be a JSON object with a 'noticias' list")
    try:
        return RawBatch.model_validate(data)
    except PydanticValidationError as exc:
        raise MalformedResponseError(f"LLM response does not match the news batch shape: {exc}") from exc


class NewsCurator:
    """Fetch a raw news batch from the configured LLM provider.

    The API key is resolved when the curator is built, so a missing key
    fails before any network call. Pass ``client`` to inject a ready-made
    SDK client (tests do this).
    """

    def __init__(self, config: LLMConfig, *, search_query: str = DEFAULT_SEARCH_QUERY, client: Any = None) -> None:
        provider = config.provider.strip().lower()
        if provider not in _SUPPORTED_PROVIDERS:
            raise ConfigurationError(f"Unsupported provider {config.provider!r}; expected one of: anthropic, openai")
        self._config = config
        self._provider = provider
        self._search_query = search_query
        self._client = client if client is not None else self._init_client()

    @property
    def provider(self) -> str:
        return self._provider

    def _resolved_api_key_env(self) -> str:
        return self._config.api_key_env or _DEFAULT_API_KEY_ENVS[self._provider]

    def _init_client(self) -> Any:
        env_var = self._resolved_api_key_env()
        api_key = os.environ.get(env_var)
        if not api_key:
            raise ConfigurationError(f"{env_var} is not set")

        if self._provider == "anthropic":
            import anthropic  # noqa: PLC0415

            return anthropic.Anthropic(api_key=api_key, timeout=self._config.timeout)

        import openai  # noqa: PLC0415

        kwargs: dict[str, Any] = {"api_key": api_key, "timeout": self._config.timeout}
        if self._config.base_url:
            kwargs["base_url"] = self._config.base_url
        return openai.OpenAI(**kwargs)

    def _call_llm(self, prompt: str) -> str:
        """Send the curation prompt and return the raw text response."""
        if self._provider == "anthropic":
            response = self._client.messages.create(
                model=self._config.model,
                max_tokens=self._config.max_tokens,
                temperature=self._config.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
            return str(response.content[0].text).strip()

        response = self._client.chat.completions.create(
            model=self._config.model,
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        content = response.choices[0].message.content
        return content.strip() if content else ""

    def fetch_raw(self, *, now: datetime | None = None) -> str:
        """Return the provider's raw response text. Provider failures raise :class:`UpstreamError`."""
        prompt = build_user_prompt(self._search_query, now or datetime.now(timezone.utc))
        logger.info("Requesting news batch from %s/%s", self._provider, self._config.model)
        try:
            return self._call_llm(prompt)
        except Exception as exc:
            logger.exception("LLM request to %s failed", self._provider)
            raise UpstreamError(f"{self._provider} request failed: {exc}") from exc

    def fetch_batch(self, *, now: datetime | None = None) -> RawBatch:
        """Fetch and parse one raw news batch."""
        batch = parse_batch(self.fetch_raw(now=now))
        logger.info("Received %d news items from %s", len(batch.items), self._provider)
        return batch
