"""
Block hierarchy - Block -> BlockClass -> StateGroup -> State.

Every level is a named container that can inherit from a peer of the
same kind, resolved through the owning StyleRegistry.
"""

from chuk_css_blocks.block.block import Block
from chuk_css_blocks.block.block_class import BlockClass, is_block_class
from chuk_css_blocks.block.inheritable import Inheritable
from chuk_css_blocks.block.registry import StyleRef, StyleRegistry
from chuk_css_blocks.block.state import State
from chuk_css_blocks.block.state_group import StateGroup

__all__ = [
    "Block",
    "BlockClass",
    "Inheritable",
    "State",
    "StateGroup",
    "StyleRef",
    "StyleRegistry",
    "is_block_class",
]
