"""
State - a leaf value within a state group.

A state named UNIVERSAL_STATE is a plain boolean flag; any other name is
one value of a multi-valued group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_css_blocks.block.inheritable import Inheritable
from chuk_css_blocks.constants import UNIVERSAL_STATE, OutputMode
from chuk_css_blocks.errors import UnsupportedOutputModeError
from chuk_css_blocks.options import OptionsReader, resolve_output_mode

if TYPE_CHECKING:
    from chuk_css_blocks.block.block_class import BlockClass
    from chuk_css_blocks.block.state_group import StateGroup


class State(Inheritable["StateGroup", "State"]):
    """A single state of a state group."""

    def _new_child(self, name: str) -> State:
        raise TypeError("State cannot own children")

    @property
    def group(self) -> StateGroup:
        assert self.parent is not None
        return self.parent

    @property
    def block_class(self) -> BlockClass:
        return self.group.block_class

    @property
    def is_universal(self) -> bool:
        """Whether this is the group's boolean state."""
        return self.name == UNIVERSAL_STATE

    def as_source(self) -> str:
        """
        Export in authored form.

        Returns:
            ``[state|group]`` or ``[state|group=name]``, prefixed by the
            class selector unless the class is the root class
        """
        if self.is_universal:
            attr = f"[state|{self.group.name}]"
        else:
            attr = f"[state|{self.group.name}={self.name}]"
        if self.block_class.is_root:
            return attr
        return f"{self.block_class.as_source()}{attr}"

    def css_class(self, opts: OptionsReader | OutputMode | str) -> str:
        """
        Export as generated class name.

        Args:
            opts: Options or output mode selecting the naming convention

        Returns:
            The generated class name

        Raises:
            UnsupportedOutputModeError: If the naming convention is not implemented
        """
        mode = resolve_output_mode(opts)
        if mode == OutputMode.BEM:
            base_class = self.block_class.css_class(mode)
            if self.is_universal:
                return f"{base_class}--{self.group.name}"
            return f"{base_class}--{self.group.name}-{self.name}"
        raise UnsupportedOutputModeError(mode)

    def as_debug(self, opts: OptionsReader | OutputMode | str) -> str:
        return f"{self.as_source()} => .{self.css_class(opts)}"
