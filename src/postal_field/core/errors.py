from __future__ import annotations


class PostalFieldError(Exception):
    """Base error for postal-field-mcp."""


class ConfigurationError(PostalFieldError):
    """Raised when a configuration value cannot be parsed."""


class ValidationError(PostalFieldError):
    """Raised when tool input validation fails."""
