"""
OpenAI adapter with tool support (function calling).
"""

import json
import logging
from collections.abc import Iterable
from typing import Any, cast

from openai.types.chat import ChatCompletionMessageParam, ChatCompletionToolParam
from typing_extensions import override

from agentboost.adapters.llm.openai_adapter import (
    OpenAIAdapter,
    coerce_max_tokens,
    coerce_temperature,
)
from agentboost.config.settings import settings
from agentboost.exceptions import LLMError
from agentboost.ports.llm.tools_port import ToolsHandlerPort


class OpenAIToolsAdapter(OpenAIAdapter):
    """Runs a prompt in a loop, letting the model call repository tools until it answers."""

    def __init__(self, tools_handler: ToolsHandlerPort, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._tools_handler: ToolsHandlerPort = tools_handler
        # (tool name, arguments) for every call of the last run
        self.last_steps: list[dict[str, Any]] = []

    def _to_openai_tools(self) -> list[dict[str, Any]]:
        tools: list[dict[str, Any]] = []
        for spec in self._tools_handler.available_tools():
            tools.append(
                {
                    "type": "function",
                    "function": {
                        "name": spec["name"],
                        "description": spec["description"],
                        "parameters": spec["parameters"],
                    },
                }
            )
        return tools

    def _tool_error_payload(self, err: Exception) -> str:
        return json.dumps(
            {
                "error": str(err),
                "available_tools": [
                    spec["name"] for spec in self._tools_handler.available_tools()
                ],
                "note": "Arguments must be strict JSON matching the tool schema.",
            },
            ensure_ascii=False,
        )

    def _process_tool_calls(
        self, msg: Any, messages: list[ChatCompletionMessageParam]
    ) -> None:
        """
        Execute the tool calls of an assistant message and append their outputs.

        Args:
            msg: The message object from OpenAI response
            messages: The conversation history to update
        """
        tool_calls = list(getattr(msg, "tool_calls", None) or [])
        messages.append(
            cast(
                ChatCompletionMessageParam,
                {
                    "role": "assistant",
                    "content": msg.content or "",
                    "tool_calls": [
                        tc.model_dump() if hasattr(tc, "model_dump") else {}
                        for tc in tool_calls
                    ],
                },
            )
        )

        for tool_call in tool_calls:
            function = getattr(tool_call, "function", None)
            if function is None:
                continue
            name = getattr(function, "name", None) or ""
            try:
                parsed_args = json.loads(getattr(function, "arguments", None) or "{}")
            except json.JSONDecodeError:
                parsed_args = {}
            if not isinstance(parsed_args, dict):
                parsed_args = {}

            self.last_steps.append({"tool": name, "arguments": parsed_args})
            try:
                result = self._tools_handler.dispatch(name, parsed_args)
            except Exception as tool_exc:
                # Hand the error back so the model can correct itself
                self._logger.warning(f"Tool {name} failed: {tool_exc}")
                result = self._tool_error_payload(tool_exc)

            messages.append(
                cast(
                    ChatCompletionMessageParam,
                    {
                        "role": "tool",
                        "tool_call_id": tool_call.id,
                        "content": str(result),
                    },
                )
            )

    @override
    def execute_with_system_message(
        self, prompt: str, system_message: str, **kwargs: Any
    ) -> str:
        """
        Run the tool-calling loop.

        Args:
            prompt: The user prompt
            system_message: The system message to set the context
            **kwargs: temperature, max_tokens, tool_max_steps

        Returns:
            The first plain assistant answer, stripped

        Raises:
            LLMError: If the model fails, answers empty, or exceeds tool_max_steps
        """
        temperature = coerce_temperature(kwargs.get("temperature", 0.2))
        max_tokens = coerce_max_tokens(kwargs.get("max_tokens", 1500))
        max_steps = int(kwargs.get("tool_max_steps") or settings.max_steps)

        self.last_steps = []
        messages = self._prepare_messages(prompt, system_message)
        tools = self._to_openai_tools()
        try:
            for step in range(max_steps):
                response = self.client.chat.completions.create(
                    model=self.model,
                    messages=cast(Iterable[ChatCompletionMessageParam], messages),
                    temperature=temperature,
                    max_tokens=max_tokens,
                    tools=cast(Iterable[ChatCompletionToolParam], tools),
                    tool_choice="auto",
                )
                msg = response.choices[0].message
                if not getattr(msg, "tool_calls", None):
                    content = (msg.content or "").strip()
                    if not content:
                        raise LLMError("Empty response received from the model")
                    self._logger.debug(f"Model answered after {step + 1} step(s)")
                    return content
                self._process_tool_calls(msg, messages)
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(f"Failed to generate response with tools: {e}")

        raise LLMError(f"Reached {max_steps} tool steps without a final answer")
