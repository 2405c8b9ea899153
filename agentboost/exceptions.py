"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class LLMError(BaseAppError):
    """Exception raised for LLM-related errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class PluginError(BaseAppError):
    """Exception raised when a plugin fails to detect or compile."""

    pass


class UsageError(BaseAppError):
    """Exception raised when the command line cannot be acted upon."""

    pass
