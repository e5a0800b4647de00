"""vectoricon conversion engine."""

from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.context import ConversionContext, OutputLine, TransformContext
from vectoricon.engine.errors import (
    ConversionError,
    Diagnostic,
    DiagnosticKind,
    InvalidAttribute,
    InvalidDocument,
    MalformedPathData,
    MissingAttribute,
)
from vectoricon.engine.pipeline import Converter, convert_svg, create_converter
from vectoricon.engine.registry import get_registry, handler

__all__ = [
    "handler",
    "get_registry",
    "ConverterConfig",
    "ConversionContext",
    "OutputLine",
    "TransformContext",
    "Converter",
    "convert_svg",
    "create_converter",
    "ConversionError",
    "Diagnostic",
    "DiagnosticKind",
    "InvalidAttribute",
    "InvalidDocument",
    "MalformedPathData",
    "MissingAttribute",
]
