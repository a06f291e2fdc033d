"""
CHUK CSS Blocks - block-scoped style hierarchies with inheritance.

This package provides:
- Block, BlockClass, StateGroup, State: the style hierarchy
- Inheritance-aware resolution of groups and states
- Authored-form and generated (BEM) class names
- Analysis attributes for optimizers
- A YAML block-definition loader
"""

from chuk_css_blocks.analysis import Attribute, ValueAbsent, ValueConstant, ValueOneOf
from chuk_css_blocks.block import (
    Block,
    BlockClass,
    State,
    StateGroup,
    StyleRef,
    StyleRegistry,
    is_block_class,
)
from chuk_css_blocks.constants import ROOT_CLASS, UNIVERSAL_STATE, OutputMode
from chuk_css_blocks.errors import (
    BlockDefinitionError,
    BlockError,
    InheritanceCycleError,
    UnsupportedOutputModeError,
)
from chuk_css_blocks.loader import BlockLoader
from chuk_css_blocks.options import OptionsReader

__all__ = [
    # Hierarchy
    "Block",
    "BlockClass",
    "StateGroup",
    "State",
    "StyleRef",
    "StyleRegistry",
    "is_block_class",
    # Analysis
    "Attribute",
    "ValueAbsent",
    "ValueConstant",
    "ValueOneOf",
    # Configuration
    "OptionsReader",
    "OutputMode",
    "ROOT_CLASS",
    "UNIVERSAL_STATE",
    # Loading
    "BlockLoader",
    # Errors
    "BlockError",
    "BlockDefinitionError",
    "InheritanceCycleError",
    "UnsupportedOutputModeError",
]
