"""Setup errors — problems that abort a run before any rule is evaluated.

Rule failures are never exceptions; they are RuleResults with passed=False.
"""

from pathlib import Path
from typing import Union


class GateSetupError(Exception):
    """A required document, schema or ruleset cannot be used."""


class DocumentNotFoundError(GateSetupError):
    """A required file does not exist."""

    def __init__(self, label: str, path: Union[str, Path], hint: str = ""):
        self.label = label
        self.path = Path(path)
        message = f"{label} not found at {path}."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class DocumentParseError(GateSetupError):
    """A file exists but is not valid JSON or does not fit its document model."""

    def __init__(self, label: str, path: Union[str, Path], reason: str):
        self.label = label
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot parse {label.lower()} at {path}: {reason}")


class SchemaConfigurationError(GateSetupError):
    """A JSON Schema document is itself invalid."""
