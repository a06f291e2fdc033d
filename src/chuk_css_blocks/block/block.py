"""
Block - the root of one stylesheet's hierarchy.
"""

from __future__ import annotations

from chuk_css_blocks.block.block_class import BlockClass
from chuk_css_blocks.block.inheritable import Inheritable
from chuk_css_blocks.block.registry import StyleRef, StyleRegistry
from chuk_css_blocks.block.state import State
from chuk_css_blocks.constants import ROOT_CLASS, OutputMode
from chuk_css_blocks.options import OptionsReader


class Block(Inheritable["Block", BlockClass]):
    """
    A named block owning a set of classes.

    The root class is created with the block. A block may inherit from
    another block in the same registry, in which case its classes
    inherit from the same-named classes of the base block.
    """

    def __init__(self, name: str, registry: StyleRegistry | None = None):
        """
        Initialize and register the block.

        Args:
            name: Block name, unique within the registry
            registry: Owning registry; a private one is created if omitted
        """
        super().__init__(name)
        self._registry = registry if registry is not None else StyleRegistry()
        self._registry.add(self)
        self.ensure_class(ROOT_CLASS)

    def _new_child(self, name: str) -> BlockClass:
        return BlockClass(name, self)

    def _rekey(self, old: str, new: str) -> None:
        self._registry.rename(old, new)

    @property
    def registry(self) -> StyleRegistry:
        return self._registry

    @property
    def ref(self) -> StyleRef:
        return StyleRef(block=self.name)

    @property
    def root_class(self) -> BlockClass:
        root = self.get_child(ROOT_CLASS)
        assert root is not None
        return root

    def classes(self) -> list[BlockClass]:
        return self.children()

    def get_class(self, name: str) -> BlockClass | None:
        return self.get_child(name)

    def ensure_class(self, name: str) -> BlockClass:
        """Get the named class, creating it if needed."""
        return self.ensure_child(name)

    def resolve_class(self, name: str) -> BlockClass | None:
        """Find a class here or on an inherited block."""
        return self.resolve_child(name)

    def all(self, shallow: bool = False) -> list[BlockClass | State]:
        """Every class, followed by its states unless shallow."""
        result: list[BlockClass | State] = []
        for cls in self.classes():
            result.extend(cls.all(shallow))
        return result

    def debug(self, opts: OptionsReader | OutputMode | str) -> list[str]:
        """A source header and one indented line per entity."""
        lines = [f"Source: {self.name}"]
        lines.extend(f"  {style.as_debug(opts)}" for style in self.all())
        return lines
