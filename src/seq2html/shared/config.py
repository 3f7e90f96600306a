"""Configuration classes for seq2html rendering.

This module provides the immutable render configuration, its validation and
dictionary/JSON conversion, plus a few presets for common call shapes.
"""

import difflib
import json
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

DEFAULT_INDENT_UNIT = "  "
DEFAULT_TREE_FACTORY = "nodes"

DoctypeSetting = Union[bool, str, None]


class OutputMode(Enum):
    """Output produced by a render call."""

    STRING = "string"   # Indented markup text
    TREE = "tree"       # In-memory document tree


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class RenderConfig:
    """Resolved configuration for a single render call.

    Thread-safe due to frozen dataclass implementation. Use :meth:`override`
    to derive a modified copy.
    """

    indent_unit: str = DEFAULT_INDENT_UNIT
    indent_depth: int = 0
    doctype: DoctypeSetting = None
    output_mode: OutputMode = OutputMode.STRING
    tree_factory: str = DEFAULT_TREE_FACTORY
    single_root: bool = False

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate and normalize the configuration."""
        if not isinstance(self.indent_unit, str):
            raise ConfigValidationError(
                "indent_unit must be a string", field_name="indent_unit"
            )
        if isinstance(self.indent_depth, bool) or not isinstance(self.indent_depth, int):
            raise ConfigValidationError(
                "indent_depth must be an integer", field_name="indent_depth"
            )
        if self.indent_depth < 0:
            raise ConfigValidationError(
                "indent_depth must be >= 0", field_name="indent_depth"
            )
        if self.doctype is not None and not isinstance(self.doctype, (bool, str)):
            raise ConfigValidationError(
                "doctype must be a boolean, a string or None", field_name="doctype"
            )
        if not isinstance(self.tree_factory, str) or not self.tree_factory:
            raise ConfigValidationError(
                "tree_factory must be a non-empty string", field_name="tree_factory"
            )

        if not isinstance(self.output_mode, OutputMode):
            # Frozen dataclass: normalize through object.__setattr__
            object.__setattr__(self, "output_mode", _coerce_output_mode(self.output_mode))

    @property
    def doctype_declaration(self) -> Optional[str]:
        """Get the doctype line to prepend, or None when disabled."""
        if not self.doctype:
            return None
        doctype = self.doctype if isinstance(self.doctype, str) else "html"
        return f"<!DOCTYPE {doctype}>\n"

    @property
    def is_tree_mode(self) -> bool:
        """Check if this configuration builds a document tree."""
        return self.output_mode is OutputMode.TREE

    def override(self, **kwargs: Any) -> "RenderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Configuration fields to override

        Returns:
            New RenderConfig instance with overrides applied

        Example:
            >>> config = RenderConfig()
            >>> config.override(indent_unit="\\t", doctype=True).doctype
            True
        """
        if not kwargs:
            return self
        _check_field_names(kwargs)
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if isinstance(value, Enum):
                value = value.value
            result[config_field.name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RenderConfig":
        """Create configuration from a mapping of field names to values.

        Args:
            data: Mapping containing configuration data

        Returns:
            RenderConfig instance created from the mapping

        Raises:
            ConfigValidationError: If a key is not a configuration field or a
                value fails validation
        """
        _check_field_names(data)
        return cls(**dict(data))

    @classmethod
    def from_json(cls, json_str: str) -> "RenderConfig":
        """Create configuration from JSON string."""
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def coerce(cls, value: Union["RenderConfig", Mapping[str, Any], None]) -> "RenderConfig":
        """Turn a configuration object, an options mapping or None into a config."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise ConfigValidationError(
            f"Expected a RenderConfig or a mapping of options, got {type(value).__name__}"
        )

    # Preset factory methods
    @classmethod
    def html_document(cls) -> "RenderConfig":
        """Create preset for a complete HTML document with a doctype line."""
        return cls(
            doctype=True,
            single_root=True,
            name="html_document",
            description="Single root element preceded by <!DOCTYPE html>",
        )

    @classmethod
    def fragment(cls, indent_depth: int = 0) -> "RenderConfig":
        """Create preset for markup fragments embedded in an existing page."""
        return cls(
            indent_depth=indent_depth,
            name="fragment",
            description="Any number of sibling elements, no doctype",
        )

    @classmethod
    def tree(cls, tree_factory: str = DEFAULT_TREE_FACTORY) -> "RenderConfig":
        """Create preset that builds a document tree instead of text."""
        return cls(
            output_mode=OutputMode.TREE,
            tree_factory=tree_factory,
            name="tree",
            description=f"Document tree built with the '{tree_factory}' factory",
        )


def _coerce_output_mode(value: Any) -> OutputMode:
    if isinstance(value, str):
        lowered = value.lower()
        for mode in OutputMode:
            if lowered in (mode.value, mode.name.lower()):
                return mode
    raise ConfigValidationError(
        f"output_mode must be one of {[mode.value for mode in OutputMode]}",
        field_name="output_mode",
        suggestions=[mode.value for mode in OutputMode],
    )


def _check_field_names(data: Mapping[str, Any]) -> None:
    known = [config_field.name for config_field in fields(RenderConfig)]
    for key in data:
        if key not in known:
            raise ConfigValidationError(
                f"Unknown configuration option: {key!r}",
                field_name=str(key),
                suggestions=difflib.get_close_matches(str(key), known),
            )
