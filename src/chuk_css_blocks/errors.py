"""
Exception types for the block system.

Lookup misses are not errors - they come back as None. These exceptions
cover configuration mistakes and malformed hierarchies only.
"""

from __future__ import annotations

from chuk_css_blocks.constants import ErrorMessages


class BlockError(Exception):
    """Base class for all block errors."""


class UnsupportedOutputModeError(BlockError, ValueError):
    """A naming convention was requested that has no implementation."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(ErrorMessages.UNSUPPORTED_OUTPUT_MODE.format(mode=mode))


class InheritanceCycleError(BlockError, ValueError):
    """A chain of base links revisits a node."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(ErrorMessages.INHERITANCE_CYCLE.format(chain=" -> ".join(chain)))


class BlockDefinitionError(BlockError, ValueError):
    """A block definition file could not be turned into a hierarchy."""
