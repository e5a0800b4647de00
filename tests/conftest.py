"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vectoricon.engine.context import TransformContext


# Material-style icon: padding path, one filled path
ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path fill="none" d="M0 0h24v24H0z"/>
  <path d="M12 2C6.48 2 2 6.48 2 12s4.48 10 10 10 10-4.48 10-10S17.52 2 12 2z"/>
</svg>'''

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 48">
  <circle cx="24" cy="24" r="10"/>
  <rect x="4" y="6" width="10" height="5" rx="2"/>
  <rect width="8" height="8"/>
</svg>'''

GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="1" cy="1" r="1"/>
  <g>
    <circle cx="2" cy="2" r="1"/>
  </g>
  <circle cx="3" cy="3" r="1"/>
  <g>
    <circle cx="4" cy="4" r="1"/>
  </g>
</svg>'''

TRANSFORMED_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g transform="translate(4 4)">
    <circle cx="2" cy="2" r="1"/>
  </g>
  <circle cx="3" cy="3" r="1"/>
</svg>'''

BROKEN_SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <rect id="no-size" x="1" y="1"/>
  <circle cx="12" cy="12"/>
  <path d="M0 0L10 --5z"/>
  <circle cx="5" cy="5" r="2"/>
</svg>'''


@pytest.fixture
def identity() -> TransformContext:
    return TransformContext()


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def groups_svg() -> str:
    return GROUPS_SVG
