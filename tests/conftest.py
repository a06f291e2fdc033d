"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_css_blocks.block import Block, StyleRegistry
from chuk_css_blocks.options import OptionsReader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> StyleRegistry:
    """An empty registry."""
    return StyleRegistry()


@pytest.fixture
def opts() -> OptionsReader:
    """Default (BEM) options."""
    return OptionsReader()


@pytest.fixture
def nav_block(registry: StyleRegistry) -> Block:
    """
    Block B with a root class and a class 'nav'.

    nav has a multi-valued group 'size' (small, large) and a boolean
    group 'enabled'.
    """
    block = Block("B", registry)
    nav = block.ensure_class("nav")
    nav.ensure_state("size", "small")
    nav.ensure_state("size", "large")
    nav.ensure_state("enabled")
    return block
