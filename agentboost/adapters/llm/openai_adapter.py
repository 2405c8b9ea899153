"""
OpenAI adapter implementation for LLM operations.
"""

import logging
from typing import Any, TypedDict, cast

from openai import OpenAI
from openai.types.chat import ChatCompletionMessageParam
from typing_extensions import override

from agentboost.config.settings import settings
from agentboost.exceptions import LLMError
from agentboost.ports.llm.llm_port import LLMPort

DEFAULT_SYSTEM_MESSAGE = "You are a senior engineer documenting a codebase for AI coding agents."


class OpenAIMessageDict(TypedDict):
    content: str


class OpenAIChoiceDict(TypedDict):
    message: OpenAIMessageDict


class OpenAIResponseDict(TypedDict):
    choices: list[OpenAIChoiceDict]


def coerce_temperature(value: Any, default: float = 0.2) -> float:
    if isinstance(value, (float, int)):
        return float(value)
    try:
        return float(str(value))
    except ValueError:
        return default


def coerce_max_tokens(value: Any, default: int = 1500) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(str(value))
    except ValueError:
        return default


class OpenAIAdapter(LLMPort):
    """OpenAI implementation of the LLM port."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        api_base: str | None = None,
        logger: logging.Logger | None = None,
        client: OpenAI | None = None,
    ):
        """
        Initialize the OpenAI adapter.

        Args:
            api_key: OpenAI API key (defaults to settings)
            model: Model name (defaults to settings)
            api_base: API base URL (defaults to settings)
            logger: Logger instance to use for logging. If None, a default logger will be created.
            client: Pre-built client, mostly for tests

        Raises:
            ConfigurationError: If no API key is available
        """
        self.model: str = model or settings.openai_model
        self.api_base: str | None = api_base or settings.openai_api_base
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

        if client is not None:
            self.client: OpenAI = client
        else:
            api_key = api_key or settings.require_openai_api_key()
            self.client = OpenAI(api_key=api_key, base_url=self.api_base)

    def _prepare_messages(
        self, prompt: str, system_message: str
    ) -> list[ChatCompletionMessageParam]:
        return cast(
            list[ChatCompletionMessageParam],
            [
                {"role": "system", "content": system_message},
                {"role": "user", "content": prompt},
            ],
        )

    def _extract_response_content(self, response: object) -> str:
        """
        Extract content from the OpenAI response.

        Raises:
            LLMError: If response is empty or invalid
        """
        dump = getattr(response, "model_dump", None)
        resp = cast(OpenAIResponseDict, dump() if callable(dump) else response)
        choices = resp.get("choices", [])
        if not choices:
            raise LLMError("No response generated from the model")
        message = choices[0].get("message")
        if not message:
            raise LLMError("Malformed response: missing message")
        content = message.get("content")
        if content:
            return content.strip()
        raise LLMError("Empty response received from the model")

    @override
    def generate_response(self, prompt: str, **kwargs: Any) -> str:
        """
        Generate a response from the OpenAI model.

        Args:
            prompt: The input prompt for text generation
            **kwargs: temperature, max_tokens, system_message

        Returns:
            Generated text response

        Raises:
            LLMError: If text generation fails
        """
        system_message = str(kwargs.pop("system_message", DEFAULT_SYSTEM_MESSAGE))
        return self.execute_with_system_message(prompt, system_message, **kwargs)

    @override
    def execute_with_system_message(
        self, prompt: str, system_message: str, **kwargs: Any
    ) -> str:
        try:
            messages = self._prepare_messages(prompt, system_message)
            self._logger.debug(f"Calling {self.model} with {len(prompt)} prompt chars")
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=coerce_temperature(kwargs.get("temperature", 0.2)),
                max_tokens=coerce_max_tokens(kwargs.get("max_tokens", 1500)),
            )
            return self._extract_response_content(response)
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(f"Failed to generate response: {str(e)}")

    @override
    def get_model_info(self) -> dict[str, Any]:
        return {"provider": "OpenAI", "model": self.model, "api_base": self.api_base}
