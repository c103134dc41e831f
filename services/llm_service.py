# services/llm_service.py
import httpx
import json
import logging
from typing import Dict, List, Optional, Type, TypeVar

from google import genai
from google.genai import types
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError

from config.settings import settings
from shared.exceptions import LLMConfigurationError, LLMServiceError
from utils.helpers import clean_json_response

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class LLMService:
    """
    Structured-output client for the coaching and journal features.

    Providers are tried in cascade and the first reply that parses into the
    requested pydantic model wins:
    1. Gemini (native JSON mode with a response schema)
    2. OpenAI-compatible chat completions endpoint over httpx
    3. OpenAI
    Provider settings are read on every call so they can change at runtime.
    """

    def __init__(self, config=None):
        self.config = config or settings

    def configured_providers(self) -> List[str]:
        providers = []
        if self.config.GEMINI_API_KEY:
            providers.append("gemini")
        if self.config.LLM_URL and self.config.LLM_URL.startswith(("http://", "https://")) and self.config.LLM_TOKEN:
            providers.append("custom")
        if self.config.OPENAI_API_KEY:
            providers.append("openai")
        return providers

    async def generate_json(
        self,
        messages: List[Dict[str, str]],
        response_model: Type[ModelT],
        temperature: float = 0.7,
    ) -> ModelT:
        """
        Generate a reply and validate it against response_model.

        Raises:
            LLMConfigurationError: if no provider is configured
            LLMServiceError: if every configured provider failed
        """
        providers = self.configured_providers()
        if not providers:
            logger.error("No LLM provider configured")
            raise LLMConfigurationError("No LLM provider is configured")

        callers = {
            "gemini": self._call_gemini,
            "custom": self._call_custom_llm,
            "openai": self._call_openai,
        }

        failures = []
        for name in providers:
            try:
                text = await callers[name](messages, response_model, temperature)
                result = self._parse(text, response_model)
                logger.info(f"{name} LLM returned a valid {response_model.__name__}")
                return result
            except (httpx.HTTPError, json.JSONDecodeError, ValidationError, LLMServiceError) as e:
                logger.warning(f"{name} LLM failed: {e}")
                failures.append(f"{name}: {e}")
            except Exception as e:
                # provider SDK errors
                logger.error(f"{name} LLM raised unexpectedly: {e}", exc_info=True)
                failures.append(f"{name}: {e}")

        raise LLMServiceError(f"All LLM providers failed ({'; '.join(failures)})")

    def _parse(self, text: Optional[str], response_model: Type[ModelT]) -> ModelT:
        if not text or not text.strip():
            raise LLMServiceError("Empty response")
        return response_model.model_validate_json(clean_json_response(text))

    async def _call_gemini(self, messages: list, response_model: Type[BaseModel], temperature: float) -> str:
        """Call Gemini in JSON mode"""
        client = genai.Client(api_key=self.config.GEMINI_API_KEY)

        gemini_contents = []
        system_instruction = None

        for msg in messages:
            if msg['role'] == 'system':
                system_instruction = msg['content']
                continue

            role = 'model' if msg['role'] == 'assistant' else 'user'
            gemini_contents.append(
                types.Content(
                    role=role,
                    parts=[types.Part(text=msg['content'])]
                )
            )

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            response_mime_type="application/json",
            response_schema=response_model,
        )

        response = await client.aio.models.generate_content(
            model=self.config.GEMINI_MODEL,
            contents=gemini_contents,
            config=config
        )
        return response.text

    async def _call_custom_llm(self, messages: list, response_model: Type[BaseModel], temperature: float) -> str:
        """Call the OpenAI-compatible endpoint"""
        payload = {
            "model": self.config.LLM_MODEL,
            "messages": self._with_schema_hint(messages, response_model),
            "temperature": temperature,
            "response_format": {"type": "json_object"},
            "stream": False
        }

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.LLM_TOKEN}"
        }

        logger.info(f"Calling custom LLM at {self.config.LLM_URL} with model {self.config.LLM_MODEL}")

        async with httpx.AsyncClient(timeout=self.config.LLM_TIMEOUT) as client:
            response = await client.post(self.config.LLM_URL, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()

        if 'error' in data:
            raise LLMServiceError(f"API Error: {data['error']}")

        if choices := data.get('choices'):
            if message := choices[0].get('message'):
                return (message.get('content') or '').strip()

        raise LLMServiceError(f"Unexpected response structure: {list(data.keys())}")

    async def _call_openai(self, messages: list, response_model: Type[BaseModel], temperature: float) -> str:
        """Call OpenAI in JSON mode"""
        client = AsyncOpenAI(api_key=self.config.OPENAI_API_KEY, timeout=self.config.LLM_TIMEOUT)

        response = await client.chat.completions.create(
            model=self.config.OPENAI_MODEL,
            messages=self._with_schema_hint(messages, response_model),
            temperature=temperature,
            response_format={"type": "json_object"},
        )

        if not response.choices:
            raise LLMServiceError("OpenAI returned empty choices")
        return (response.choices[0].message.content or '').strip()

    def _with_schema_hint(self, messages: list, response_model: Type[BaseModel]) -> List[Dict[str, str]]:
        """Providers without native schema support get the JSON schema as an extra system message"""
        schema = json.dumps(response_model.model_json_schema(by_alias=True))
        hint = {
            "role": "system",
            "content": f"Respond with a single JSON object only, matching this JSON schema:\n{schema}"
        }
        return [{"role": m["role"], "content": m["content"]} for m in messages] + [hint]


# Create global instance
llm_service = LLMService()
