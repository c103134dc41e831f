import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest

from models.journal_models import TrendAnalysisResult
from services.llm_service import LLMService
from shared.exceptions import LLMConfigurationError, LLMServiceError
from conftest import SAMPLE_TRENDS


MESSAGES = [{"role": "system", "content": "coach"}, {"role": "user", "content": "hi"}]


def make_config(**overrides):
    config = dict(
        GEMINI_API_KEY="",
        GEMINI_MODEL="gemini-2.0-flash",
        LLM_URL="",
        LLM_TOKEN="",
        LLM_MODEL="local-model",
        OPENAI_API_KEY="",
        OPENAI_MODEL="gpt-4o-mini",
        LLM_TIMEOUT=5,
    )
    config.update(overrides)
    return SimpleNamespace(**config)


def test_providers_follow_configuration():
    service = LLMService(make_config(GEMINI_API_KEY="g", LLM_URL="https://llm.local/v1", LLM_TOKEN="t", OPENAI_API_KEY="o"))
    assert service.configured_providers() == ["gemini", "custom", "openai"]

    assert LLMService(make_config(LLM_URL="not-a-url", LLM_TOKEN="t")).configured_providers() == []


def test_no_provider_raises_configuration_error():
    service = LLMService(make_config())
    with pytest.raises(LLMConfigurationError):
        asyncio.run(service.generate_json(MESSAGES, TrendAnalysisResult))


def test_cascade_falls_through_to_next_provider(monkeypatch):
    service = LLMService(make_config(GEMINI_API_KEY="g", LLM_URL="https://llm.local/v1", LLM_TOKEN="t"))
    fenced = "```json\n" + json.dumps(SAMPLE_TRENDS) + "\n```"

    monkeypatch.setattr(service, "_call_gemini", AsyncMock(side_effect=httpx.ConnectError("down")))
    monkeypatch.setattr(service, "_call_custom_llm", AsyncMock(return_value=fenced))

    result = asyncio.run(service.generate_json(MESSAGES, TrendAnalysisResult))

    assert result.overall_trend == "improving"
    service._call_custom_llm.assert_awaited_once()


def test_invalid_json_counts_as_failure(monkeypatch):
    service = LLMService(make_config(GEMINI_API_KEY="g", OPENAI_API_KEY="o"))

    monkeypatch.setattr(service, "_call_gemini", AsyncMock(return_value='{"overall_trend": "sideways"}'))
    monkeypatch.setattr(service, "_call_openai", AsyncMock(return_value=""))

    with pytest.raises(LLMServiceError, match="All LLM providers failed"):
        asyncio.run(service.generate_json(MESSAGES, TrendAnalysisResult))


def test_schema_hint_appended_for_plain_providers():
    service = LLMService(make_config())
    messages = service._with_schema_hint(MESSAGES, TrendAnalysisResult)

    assert messages[:2] == MESSAGES
    assert messages[-1]["role"] == "system"
    assert "weekly_focus" in messages[-1]["content"]
