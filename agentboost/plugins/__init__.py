"""Repository recognizers, in the order they are detected and compiled."""

from agentboost.plugins.base import Plugin, PluginContext
from agentboost.plugins.big_picture import BigPicturePlugin
from agentboost.plugins.laravel import LaravelPlugin
from agentboost.plugins.nextjs import NextJSPlugin
from agentboost.plugins.react import ReactPlugin
from agentboost.plugins.tailwind import TailwindPlugin
from agentboost.plugins.vue import VuePlugin

DEFAULT_PLUGINS: list[type[Plugin]] = [
    ReactPlugin,
    VuePlugin,
    LaravelPlugin,
    NextJSPlugin,
    TailwindPlugin,
    BigPicturePlugin,
]

__all__ = ["DEFAULT_PLUGINS", "Plugin", "PluginContext"]
