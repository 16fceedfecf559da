"""Custom exceptions for tagdown with context support."""

from typing import Any, Optional


class TagdownError(Exception):
    """Base exception for tagdown carrying a context dictionary for debugging."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """
        Initialise exception with message and context.

        Args:
            message: Error message.
            context: Optional context dictionary for debugging.
        """
        self.message = message
        self.context = context or {}
        super().__init__(message)


class ServiceError(TagdownError):
    """Raised when a service is configured twice or is missing."""

    def __init__(self, message: str, name: Optional[str] = None, context: Optional[dict[str, Any]] = None) -> None:
        """
        Initialise service error with the offending service name.

        Args:
            message: Error message.
            name: Optional name of the service involved.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if name is not None:
            context["service"] = name
        self.name = name
        super().__init__(message, context=context)


class PluginError(TagdownError):
    """Raised when a plugin does not honour the plugin contract."""


class ConversionDepthError(TagdownError):
    """Raised when element nesting exceeds the configured maximum depth."""

    def __init__(self, depth: int, max_depth: int, tag_name: Optional[str] = None) -> None:
        """
        Initialise depth error.

        Args:
            depth: Nesting depth that was reached.
            max_depth: Configured maximum depth.
            tag_name: Tag name of the element that exceeded the limit.
        """
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Element nesting depth {depth} exceeds maximum of {max_depth}",
            context={"depth": depth, "max_depth": max_depth, "tag_name": tag_name},
        )
