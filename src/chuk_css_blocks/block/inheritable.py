"""
Inheritable - the named-container shared by every node in a block.

Each node owns a set of uniquely named children and may declare a base
node of the same kind. Lookups that resolve through inheritance walk
the base chain; plain lookups only see directly owned children.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Self, TypeVar

from chuk_css_blocks.block.registry import StyleRef, StyleRegistry
from chuk_css_blocks.constants import ErrorMessages
from chuk_css_blocks.errors import InheritanceCycleError

if TYPE_CHECKING:
    from chuk_css_blocks.block.block import Block

logger = logging.getLogger(__name__)

ParentT = TypeVar("ParentT", bound="Inheritable")
ChildT = TypeVar("ChildT", bound="Inheritable")


class Inheritable(Generic[ParentT, ChildT]):
    """
    Generic named container with a declared, mutable base link.

    Concrete kinds supply ``_new_child`` (how to build a child) and, for
    the root kind, ``ref`` and ``registry``.
    """

    def __init__(self, name: str, parent: ParentT | None = None):
        """
        Initialize the node.

        Args:
            name: Name, unique within the parent
            parent: Owning node (None for a block)
        """
        self._name = name
        self._parent = parent
        self._children: dict[str, ChildT] = {}
        self._base_ref: StyleRef | None = None

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        """
        Rename the node, re-keying it in its owner.

        References taken before the rename still name the old path and
        read back as None.
        """
        if value == self._name:
            return
        self._rekey(self._name, value)
        logger.debug("Renamed %s to %s", self.ref, value)
        self._name = value

    def _rekey(self, old: str, new: str) -> None:
        parent = self._parent
        if parent is None:
            return
        if new in parent._children:
            raise ValueError(ErrorMessages.DUPLICATE_CHILD.format(name=new, owner=parent.ref))
        parent._children = {(new if key == old else key): child for key, child in parent._children.items()}

    @property
    def parent(self) -> ParentT | None:
        """The owning node."""
        return self._parent

    @property
    def block(self) -> Block:
        """The block at the root of this node's tree."""
        node: Inheritable = self
        while node.parent is not None:
            node = node.parent
        return node  # type: ignore[return-value]

    @property
    def registry(self) -> StyleRegistry:
        """Registry that resolves this node's base links."""
        return self.block.registry

    @property
    def ref(self) -> StyleRef:
        """Identifier of this node within its registry."""
        assert self.parent is not None
        return self.parent.ref.child(self.name)

    def _new_child(self, name: str) -> ChildT:
        raise NotImplementedError(f"{type(self).__name__} cannot own children")

    # Children

    def get_child(self, name: str) -> ChildT | None:
        """Directly owned child, ignoring inheritance."""
        return self._children.get(name)

    def ensure_child(self, name: str) -> ChildT:
        """
        Get the named child, creating it if needed.

        Args:
            name: Child name

        Returns:
            The existing or newly created child
        """
        child = self._children.get(name)
        if child is None:
            child = self._new_child(name)
            self._children[name] = child
            logger.debug("Created %s %s", type(child).__name__, child.ref)
        return child

    def children(self) -> list[ChildT]:
        """Directly owned children in insertion order."""
        return list(self._children.values())

    def resolve_child(self, name: str) -> ChildT | None:
        """
        Find a child here or on the nearest base that has one.

        Args:
            name: Child name

        Returns:
            The first matching child, or None
        """
        child = self.get_child(name)
        if child is not None:
            return child
        for base in self.resolve_inheritance():
            child = base.get_child(name)
            if child is not None:
                return child
        return None

    # Inheritance

    @property
    def base(self) -> Self | None:
        """
        The node this one inherits from.

        An explicit base wins. Otherwise, if the parent inherits from
        something, the same-named child resolved on the parent's base is
        used.
        """
        if self._base_ref is not None:
            return self.registry.lookup(self._base_ref)
        parent = self.parent
        if parent is None:
            return None
        parent_base = parent.base
        if parent_base is None:
            return None
        return parent_base.resolve_child(self.name)

    @base.setter
    def base(self, value: Self | None) -> None:
        if value is None:
            self._base_ref = None
            return
        if type(value) is not type(self):
            raise TypeError(
                ErrorMessages.BASE_KIND_MISMATCH.format(
                    kind=type(self).__name__, other=type(value).__name__
                )
            )
        if value.registry is not self.registry:
            raise ValueError(ErrorMessages.FOREIGN_REGISTRY.format(ref=value.ref))
        self._base_ref = value.ref
        logger.debug("Set base of %s to %s", self.ref, value.ref)

    @property
    def has_base(self) -> bool:
        """Whether this node inherits from anything."""
        return self.base is not None

    def resolve_inheritance(self) -> list[Self]:
        """
        Ancestors of this node, immediate base first.

        Raises:
            InheritanceCycleError: If the base chain loops back on itself
        """
        chain: list[Self] = []
        seen: set[Inheritable] = {self}
        base = self.base
        while base is not None:
            if base in seen:
                refs = [str(n.ref) for n in (self, *chain, base)]
                logger.error("Inheritance cycle at %s", self.ref)
                raise InheritanceCycleError(refs)
            seen.add(base)
            chain.append(base)
            base = base.base
        return chain

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.ref)!r})"
