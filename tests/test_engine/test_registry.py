"""Tests for the shape-handler registry."""

import pytest

from vectoricon.engine.registry import HandlerRegistry, HandlerSpec, get_registry, load_handlers


def _noop(element, ctx, config):
    return []


def test_register_and_get():
    reg = HandlerRegistry()
    spec = HandlerSpec(tag="circle", fn=_noop)
    reg.register(spec)
    assert reg.get("circle") is spec
    assert reg.get("ellipse") is None
    assert reg.count == 1


def test_duplicate_tag_rejected():
    reg = HandlerRegistry()
    reg.register(HandlerSpec(tag="rect", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(HandlerSpec(tag="rect", fn=_noop))


def test_all_sorted_by_tag():
    reg = HandlerRegistry()
    reg.register(HandlerSpec(tag="rect", fn=_noop))
    reg.register(HandlerSpec(tag="circle", fn=_noop))
    assert [s.tag for s in reg.all()] == ["circle", "rect"]


def test_load_handlers_registers_shapes():
    reg = load_handlers()
    assert reg is get_registry()
    assert reg.tags == ["circle", "path", "rect"]


def test_load_handlers_is_repeatable():
    load_handlers()
    assert load_handlers().count == 3
