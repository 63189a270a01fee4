"""Base configuration classes and validation errors.

``validate()`` collects every problem found in a configuration so the CLI can
report missing production endpoints together; ``validate_or_raise()`` turns a
failed result into a ``ConfigValidationError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from showcase_api.exceptions import ShowcaseError, ValidationError


class ConfigurationError(ShowcaseError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigurationError, ValidationError):
    """Raised by ``validate_or_raise`` when a configuration is unusable.

    Also a ``showcase_api.ValidationError``, so one handler covers bad
    configuration and bad caller input. ``context["errors"]`` lists every
    problem found.
    """


class SerializationError(ConfigurationError):
    """Raised when ``from_dict`` cannot build a configuration."""


@dataclass
class ConfigValidationResult:
    success: bool = True
    errors: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self.success = False


class Configuration(ABC):
    """Interface shared by showcase-api configuration types."""

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary that is safe to log."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        pass

    def is_valid(self) -> bool:
        return self.validate().success

    def validate_or_raise(self) -> None:
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise ConfigValidationError(error_msg, {"errors": list(result.errors)})
