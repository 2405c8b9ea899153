"""
"Big picture" plugin: asks the language model, equipped with the codebase
tools, to summarize the architectural decisions of the repository.
"""

import os

from typing_extensions import override

from agentboost.config.settings import settings
from agentboost.plugins.base import Plugin

PROMPT_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "prompts", "big_picture.md"
)


def load_prompt(path: str = PROMPT_PATH) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


class BigPicturePlugin(Plugin):
    name = "BigPicturePlugin"

    @override
    def detect(self) -> bool:
        self._logger.info('Found "Big Picture" architectural decisions.')
        return True

    @override
    def compile(self) -> str:
        llm = self.context.get_llm()
        response = llm.generate_response(
            load_prompt(),
            system_message=(
                "You are a senior engineer. Explore the repository with the tools "
                "provided before answering, and answer in Markdown."
            ),
            tool_max_steps=settings.max_steps,
        )
        return response.strip()
