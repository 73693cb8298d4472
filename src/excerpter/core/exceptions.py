from __future__ import annotations

from typing import Any, Dict, Mapping


class ExcerpterError(Exception):
    """Base exception for Excerpter."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
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


class ConfigurationError(ExcerpterError, ValueError):
    """Raised when configuration cannot be read or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ExcerpterError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class RegionNotFoundError(ExcerpterError, KeyError):
    """Raised when an excerpt name is not present in a weave result."""

    def __init__(self, name: str, *, available: list[str] | None = None) -> None:
        message = f"Unknown region '{name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        ExcerpterError.__init__(
            self, message, context={"region": name, "available": list(available or [])}
        )
        KeyError.__init__(self, message)
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ExcerpterError",
    "ConfigurationError",
    "RegionNotFoundError",
]
