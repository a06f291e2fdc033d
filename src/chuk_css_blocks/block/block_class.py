"""
BlockClass - an authored class scoped to its block.

This is where inheritance-aware state resolution happens, and where a
class is exported in both its authored form and its generated form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chuk_css_blocks.analysis import Attribute, AttributeValue, absent, constant, one_of
from chuk_css_blocks.block.inheritable import Inheritable
from chuk_css_blocks.block.state import State
from chuk_css_blocks.block.state_group import StateGroup
from chuk_css_blocks.constants import CLASS_SELECTOR_PREFIX, ROOT_CLASS, UNIVERSAL_STATE, OutputMode
from chuk_css_blocks.errors import UnsupportedOutputModeError
from chuk_css_blocks.options import OptionsReader, resolve_output_mode

if TYPE_CHECKING:
    from chuk_css_blocks.block.block import Block


class BlockClass(Inheritable["Block", StateGroup]):
    """
    A class present in a block.

    Owns state groups keyed by name. The class named ROOT_CLASS stands
    for the block itself.
    """

    def __init__(self, name: str, parent: Block):
        super().__init__(name, parent)
        self._source_attribute: Attribute | None = None
        # Ruleset payload attached by the stylesheet compiler; never read here.
        self.rulesets: Any = None

    def _new_child(self, name: str) -> StateGroup:
        return StateGroup(name, self)

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_CLASS

    # Groups and states

    def get_groups(self) -> list[StateGroup]:
        return self.children()

    def state_groups(self) -> list[StateGroup]:
        return self.children()

    def get_group(self, name: str) -> StateGroup | None:
        return self.get_child(name)

    def get_groups_names(self) -> set[str]:
        """Names of directly owned groups."""
        return set(self._children)

    def get_states(self, name: str, filter: str | None = None) -> list[State]:
        """
        States of a directly owned group.

        Args:
            name: Group name
            filter: Optional state name to keep

        Returns:
            Matching states; empty if the group does not exist
        """
        group = self.get_child(name)
        if group is None:
            return []
        states = group.states()
        return [s for s in states if s.name == filter] if filter else states

    def get_state(self, group_name: str, state_name: str = UNIVERSAL_STATE) -> State | None:
        """
        A state defined against this specific class.

        Does not take inheritance into account.
        """
        group = self.get_group(group_name)
        return group.get_state(state_name) if group else None

    def ensure_group(self, name: str) -> StateGroup:
        """Get the named group, creating it if needed."""
        return self.ensure_child(name)

    def ensure_state(self, group_name: str, state_name: str | None = None) -> State:
        """
        Get a state, creating its group and the state itself if needed.

        Args:
            group_name: State group name
            state_name: State name; None means the universal state

        Returns:
            The state
        """
        return self.ensure_group(group_name).ensure_state(state_name or UNIVERSAL_STATE)

    # Resolution

    def resolve_group(self, name: str) -> StateGroup | None:
        """Find a group here or on the nearest inherited class."""
        return self.resolve_child(name)

    def resolve_state(self, group_name: str, state_name: str = UNIVERSAL_STATE) -> State | None:
        """
        Find a state through inheritance.

        Args:
            group_name: Group to resolve first
            state_name: State to resolve within that group

        Returns:
            The state, or None if either the group or the state is missing
        """
        group = self.resolve_child(group_name)
        if group is None:
            return None
        return group.resolve_state(state_name)

    def resolve_states(self, group_name: str | None = None) -> dict[str, State]:
        """
        Merge states across this class's inheritance chain.

        The chain is walked farthest ancestor first and this class last,
        so a state defined closer to this class replaces an inherited
        state of the same name. States only an ancestor defines are kept.

        Args:
            group_name: Only merge this group; None merges every group

        Returns:
            State name to State; empty if nothing matched
        """
        chain = [*reversed(self.resolve_inheritance()), self]
        resolved: dict[str, State] = {}
        for cls in chain:
            groups = cls.get_groups() if group_name is None else [cls.get_group(group_name)]
            for group in groups:
                if group is None:
                    continue
                resolved.update(group.states_map())
        return resolved

    def boolean_states(self) -> list[State]:
        """
        Universal states of directly owned groups that have no sub states.

        Does not take inheritance into account.
        """
        result: list[State] = []
        for group in self.get_groups():
            state = group.get_state(UNIVERSAL_STATE)
            if not group.has_sub_states and state is not None:
                result.append(state)
        return result

    # Export

    def local_name(self) -> str:
        return self.name

    def as_source(self) -> str:
        """Export as the authored class selector."""
        return ROOT_CLASS if self.is_root else f"{CLASS_SELECTOR_PREFIX}{self.name}"

    def as_source_attributes(self, optional_root: bool = False) -> list[Attribute]:
        """
        Analysis attributes for this class in its authored form.

        The result is computed once and cached. The ``optional_root``
        flag of the first call decides the cached value; later calls
        return it unchanged whatever they pass, and a later rename does
        not refresh it.

        Args:
            optional_root: The root class is implied by root-level
                states, so when the attribute is used alongside a state
                the root class value may be absent

        Returns:
            A single ``class`` attribute
        """
        if self._source_attribute is None:
            value: AttributeValue = constant(self.name)
            if optional_root and self.is_root:
                value = one_of([value, absent()])
            self._source_attribute = Attribute(name="class", value=value)
        return [self._source_attribute]

    def css_class(self, opts: OptionsReader | OutputMode | str) -> str:
        """
        Export as generated class name.

        Args:
            opts: Options or output mode selecting the naming convention

        Returns:
            ``block`` for the root class, ``block__class`` otherwise

        Raises:
            UnsupportedOutputModeError: If the naming convention is not implemented
        """
        mode = resolve_output_mode(opts)
        if mode == OutputMode.BEM:
            if self.is_root:
                return self.block.name
            return f"{self.block.name}__{self.name}"
        raise UnsupportedOutputModeError(mode)

    def all(self, shallow: bool = False) -> list[BlockClass | State]:
        """
        This class and, unless shallow, all of its own states.

        Args:
            shallow: Leave out the states
        """
        result: list[BlockClass | State] = [self]
        if not shallow:
            result.extend(self.all_states())
        return result

    def all_states(self) -> list[State]:
        """
        All states defined against this class.

        Does not take inheritance into account.
        """
        result: list[State] = []
        for group in self.state_groups():
            result.extend(group.states())
        return result

    def as_debug(self, opts: OptionsReader | OutputMode | str) -> str:
        return f"{self.as_source()} => .{self.css_class(opts)}"

    def debug(self, opts: OptionsReader | OutputMode | str) -> list[str]:
        """One debug line per entity returned by ``all()``."""
        return [style.as_debug(opts) for style in self.all()]


def is_block_class(obj: object) -> bool:
    return isinstance(obj, BlockClass)
