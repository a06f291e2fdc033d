"""
StateGroup - a named set of related states under one class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_css_blocks.block.inheritable import Inheritable
from chuk_css_blocks.block.state import State
from chuk_css_blocks.constants import UNIVERSAL_STATE

if TYPE_CHECKING:
    from chuk_css_blocks.block.block_class import BlockClass


class StateGroup(Inheritable["BlockClass", State]):
    """
    A group of states owned by a block class.

    A group with only the universal state is a boolean flag. Any other
    state name makes it a multi-valued group with sub states.
    """

    def _new_child(self, name: str) -> State:
        return State(name, self)

    @property
    def block_class(self) -> BlockClass:
        assert self.parent is not None
        return self.parent

    @property
    def has_sub_states(self) -> bool:
        """Whether the group defines any named (non-universal) state."""
        return any(name != UNIVERSAL_STATE for name in self._children)

    def states(self) -> list[State]:
        """Directly owned states in insertion order."""
        return self.children()

    def states_map(self) -> dict[str, State]:
        """Directly owned states keyed by name."""
        return dict(self._children)

    def get_state(self, name: str = UNIVERSAL_STATE) -> State | None:
        return self.get_child(name)

    def ensure_state(self, name: str = UNIVERSAL_STATE) -> State:
        """Get the named state, creating it if needed."""
        return self.ensure_child(name)

    def resolve_state(self, name: str = UNIVERSAL_STATE) -> State | None:
        """Find the named state here or on an inherited group."""
        return self.resolve_child(name)

    def as_source(self) -> str:
        attr = f"[state|{self.name}]"
        if self.block_class.is_root:
            return attr
        return f"{self.block_class.as_source()}{attr}"
