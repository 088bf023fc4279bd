from __future__ import annotations

from typing import Any, Dict, Mapping


class LintdexError(Exception):
    """Base exception for lintdex."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class RegistryError(LintdexError, ValueError):
    """Raised when the rule registry data is malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LintdexError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigurationError(LintdexError):
    """Raised when a settings or project configuration file cannot be used."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        errors: list[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        if errors:
            ctx["errors"] = list(errors)
        super().__init__(message, context=ctx)
        self.errors = list(errors or [])


class UsageError(LintdexError):
    """Caller misuse that is reported to the user rather than raised.

    Query operations return these inside a failure outcome.
    """


__all__ = [
    "LintdexError",
    "RegistryError",
    "ConfigurationError",
    "UsageError",
]
