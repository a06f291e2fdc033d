"""
Style registry - owns blocks and resolves references into them.

Inheritance links are stored as StyleRef identifiers rather than object
references, and only turned back into nodes through the registry that
owns the target block.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from chuk_css_blocks.constants import ErrorMessages

if TYPE_CHECKING:
    from chuk_css_blocks.block.block import Block

logger = logging.getLogger(__name__)


class StyleRef(BaseModel):
    """
    Identifier of one node in a registry.

    The path is empty for a block, then grows by one name per level:
    (class,), (class, group), (class, group, state).
    """

    block: str = Field(..., description="Owning block name")
    path: tuple[str, ...] = Field(default=(), max_length=3)

    model_config = {"frozen": True}

    def child(self, name: str) -> StyleRef:
        """Reference to the named child of this node."""
        return StyleRef(block=self.block, path=(*self.path, name))

    def __str__(self) -> str:
        if not self.path:
            return self.block
        return f"{self.block}:{'/'.join(self.path)}"


class StyleRegistry:
    """
    Owns a set of uniquely named blocks.

    Every block belongs to exactly one registry; base links may only
    point at nodes in the same registry.
    """

    def __init__(self) -> None:
        self._blocks: dict[str, Block] = {}

    def add(self, block: Block) -> None:
        """
        Register a block.

        Args:
            block: Block to register

        Raises:
            ValueError: If a block with the same name is already registered
        """
        if block.name in self._blocks:
            raise ValueError(ErrorMessages.DUPLICATE_BLOCK.format(name=block.name))
        self._blocks[block.name] = block
        logger.debug("Registered block %s", block.name)

    def get(self, name: str) -> Block | None:
        """Get a block by name."""
        return self._blocks.get(name)

    def remove(self, name: str) -> Block | None:
        """Unregister a block, returning it if it was registered."""
        block = self._blocks.pop(name, None)
        if block is not None:
            logger.debug("Unregistered block %s", name)
        return block

    def rename(self, old: str, new: str) -> None:
        """
        Re-key a registered block, keeping registration order.

        Raises:
            ValueError: If another block already uses the new name
        """
        if new in self._blocks:
            raise ValueError(ErrorMessages.DUPLICATE_BLOCK.format(name=new))
        self._blocks = {(new if key == old else key): block for key, block in self._blocks.items()}

    def blocks(self) -> list[Block]:
        """All blocks in registration order."""
        return list(self._blocks.values())

    def lookup(self, ref: StyleRef) -> Any | None:
        """
        Resolve a reference to its node.

        Args:
            ref: Reference to resolve

        Returns:
            The referenced node, or None if any step is missing
        """
        node: Any | None = self._blocks.get(ref.block)
        for name in ref.path:
            if node is None:
                return None
            node = node.get_child(name)
        return node

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)
