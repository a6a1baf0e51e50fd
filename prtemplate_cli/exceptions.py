from __future__ import annotations


class PrTemplateError(Exception):
    """Base exception with user-friendly message."""
    pass


class ConfigError(PrTemplateError):
    pass


class SourceError(PrTemplateError):
    pass


class ApiError(PrTemplateError):
    pass


class AuthenticationError(ApiError):
    pass


class ComplianceError(PrTemplateError):
    pass
