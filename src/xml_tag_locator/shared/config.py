"""Configuration classes and argument validation for tag location.

This module provides the immutable ``SearchOptions`` object accepted by every
locator function, the exception hierarchy for configuration and argument
errors, and the validation helpers shared by the public API.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional, Sequence


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


class InvalidArgumentError(ConfigError, ValueError):
    """Exception raised when a locator is called with an unusable argument.

    Absence of a tag or attribute is never reported through this exception;
    it is reserved for calls no input text could satisfy, such as an empty
    tag name.
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


@dataclass(frozen=True)
class SearchOptions:
    """Options recognised by the tag and path locators.

    Thread-safe due to frozen dataclass implementation; use ``override`` to
    derive a modified copy.
    """

    start_index: int = 0
    nested: bool = True
    debug: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate search options."""
        if isinstance(self.start_index, bool) or not isinstance(self.start_index, int):
            raise ConfigValidationError(
                "start_index must be an integer", field_name="start_index"
            )
        if self.start_index < 0:
            raise ConfigValidationError(
                "start_index must be >= 0",
                field_name="start_index",
                suggestions=["Use 0 to search from the beginning of the text"],
            )
        if not isinstance(self.nested, bool):
            raise ConfigValidationError("nested must be a boolean", field_name="nested")
        if not isinstance(self.debug, bool):
            raise ConfigValidationError("debug must be a boolean", field_name="debug")

    def override(self, **kwargs: Any) -> "SearchOptions":
        """Create a new options object with specific overrides.

        Raises:
            ConfigValidationError: If a keyword is not a known option
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown search option(s): {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        if not kwargs:
            return self
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchOptions":
        """Create options from a dictionary, rejecting unknown keys."""
        return cls().override(**data)


DEFAULT_OPTIONS = SearchOptions()


def resolve_options(
    options: Optional[SearchOptions] = None, **overrides: Any
) -> SearchOptions:
    """Combine an optional options object with keyword overrides.

    A plain ``dict`` is accepted in place of ``SearchOptions`` for callers that
    build options dynamically.
    """
    if options is None:
        base = DEFAULT_OPTIONS
    elif isinstance(options, SearchOptions):
        base = options
    elif isinstance(options, dict):
        base = SearchOptions.from_dict(options)
    else:
        raise InvalidArgumentError(
            f"options must be SearchOptions or dict, got {type(options).__name__}",
            argument="options",
        )
    return base.override(**overrides)


def require_text(text: Any, argument: str = "text") -> str:
    """Ensure the searched text is a string."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"{argument} must be a string, got {type(text).__name__}",
            argument=argument,
        )
    return text


def require_name(name: Any, argument: str = "name") -> str:
    """Ensure a tag or attribute name is a non-empty string."""
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"{argument} must be a string, got {type(name).__name__}",
            argument=argument,
        )
    if not name:
        raise InvalidArgumentError(f"{argument} must not be empty", argument=argument)
    return name


def require_path(path: Any) -> List[str]:
    """Ensure a tag path is a non-empty sequence of non-empty names."""
    if isinstance(path, str) or not isinstance(path, Sequence):
        raise InvalidArgumentError(
            "path must be a sequence of tag names", argument="path"
        )
    if not path:
        raise InvalidArgumentError("path must not be empty", argument="path")
    return [require_name(segment, argument="path segment") for segment in path]
