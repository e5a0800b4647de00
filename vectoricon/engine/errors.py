"""Conversion errors and non-fatal diagnostics."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ConversionError(ValueError):
    """Base class for every error raised while converting a document."""


class MalformedPathData(ConversionError):
    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class MissingAttribute(ConversionError):
    def __init__(self, element: str, attribute: str) -> None:
        super().__init__(f"<{element}> is missing required attribute '{attribute}'")
        self.element = element
        self.attribute = attribute


class InvalidAttribute(ConversionError):
    def __init__(self, element: str, attribute: str, value: str) -> None:
        super().__init__(f"<{element}> attribute '{attribute}' is not a number: {value!r}")
        self.element = element
        self.attribute = attribute
        self.value = value


class InvalidDocument(ConversionError):
    """The input is not a parseable SVG document."""


class DiagnosticKind(str, enum.Enum):
    UNSUPPORTED_COMMAND = "unsupported_command"
    SKIPPED_SHAPE = "skipped_shape"
    UNSUPPORTED_TRANSFORM = "unsupported_transform"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    element: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.element}: {self.message}"
