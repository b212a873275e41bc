"""
Completion service client.

Wraps OpenAI chat completions in JSON mode. Routes depend on
``CompletionClient`` through ``get_completion_client`` so tests can swap in a
canned implementation.
"""
import logging

from openai import OpenAI, OpenAIError

from runova.core.config import settings
from runova.core.errors import GenerationError


logger = logging.getLogger(__name__)


class CompletionClient:
    """Interface: turn a system + user prompt into raw JSON text."""

    def complete_json(self, system: str, prompt: str) -> str:
        raise NotImplementedError


class OpenAICompletionClient(CompletionClient):
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        client: OpenAI | None = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.temperature = settings.openai_temperature if temperature is None else temperature
        self.timeout = timeout or settings.openai_timeout
        self._client = client

    def _get_client(self) -> OpenAI:
        # Built on first use; OpenAI() raises when no API key is configured
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,  # surface the first error
            )
        return self._client

    def complete_json(self, system: str, prompt: str) -> str:
        try:
            completion = self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.warning("Completion request failed: %s", e)
            raise GenerationError(f"Plan generation failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        return content or "{}"
