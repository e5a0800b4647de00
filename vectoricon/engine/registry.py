"""Shape-handler registry — every handler is a standalone function registered via decorator.

Usage:
    @handler(tag="circle", description="Circle → CIRCLE")
    def circle(element: ET.Element, ctx: ConversionContext, config: ConverterConfig) -> list[OutputLine]:
        ...

Adding a new shape = creating one module in engine/shapes with the decorator.
Nothing else changes.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from vectoricon.engine.config import ConverterConfig
    from vectoricon.engine.context import ConversionContext, OutputLine

logger = logging.getLogger(__name__)

HandlerFn = Callable[[ET.Element, "ConversionContext", "ConverterConfig"], "list[OutputLine]"]


@dataclass
class HandlerSpec:
    tag: str
    fn: HandlerFn
    description: str = ""


class HandlerRegistry:
    """Maps SVG element tag names to shape handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, HandlerSpec] = {}

    def register(self, spec: HandlerSpec) -> None:
        if spec.tag in self._handlers:
            raise ValueError(f"Duplicate handler for <{spec.tag}>")
        self._handlers[spec.tag] = spec
        logger.debug("Registered handler for <%s>", spec.tag)

    def get(self, tag: str) -> HandlerSpec | None:
        return self._handlers.get(tag)

    def all(self) -> list[HandlerSpec]:
        return sorted(self._handlers.values(), key=lambda s: s.tag)

    @property
    def tags(self) -> list[str]:
        return sorted(self._handlers)

    @property
    def count(self) -> int:
        return len(self._handlers)


# Module-level singleton
_registry = HandlerRegistry()


def get_registry() -> HandlerRegistry:
    return _registry


def handler(*, tag: str, description: str = ""):
    """Decorator to register a shape handler."""

    def decorator(fn: HandlerFn):
        _registry.register(HandlerSpec(tag=tag, fn=fn, description=description))
        return fn

    return decorator


def load_handlers() -> HandlerRegistry:
    """Import every module in engine/shapes so @handler decorators fire."""
    package = importlib.import_module("vectoricon.engine.shapes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
