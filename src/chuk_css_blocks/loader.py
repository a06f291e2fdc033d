"""
Block loader - builds block hierarchies from YAML definitions.

A definition file lists blocks, their classes and state groups, and the
inheritance links between them:

    blocks:
      - name: base
        classes:
          nav:
            states:
              size: [small, large]
              enabled: []
      - name: theme
        extends: base
        classes:
          nav:
            extends: base.nav

Blocks are created first and inheritance is wired afterwards, so a block
may extend one defined later in the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_css_blocks.block import Block, BlockClass, StyleRegistry
from chuk_css_blocks.constants import ErrorMessages
from chuk_css_blocks.errors import BlockDefinitionError

logger = logging.getLogger(__name__)


class BlockLoader:
    """
    Loads block definitions into a registry.

    All blocks loaded by one loader share its registry, so they may
    inherit from each other.
    """

    def __init__(self, registry: StyleRegistry | None = None):
        """
        Initialize the loader.

        Args:
            registry: Registry to load into; a new one is created if omitted
        """
        self.registry = registry if registry is not None else StyleRegistry()

    def load_file(self, path: Path) -> list[Block]:
        """
        Load blocks from a YAML file.

        Args:
            path: Path to the definition file

        Returns:
            The created blocks in file order

        Raises:
            BlockDefinitionError: If the file cannot be read or parsed, or
                its definitions are invalid
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise BlockDefinitionError(f"Cannot read {path}: {e}") from e

        blocks = self.load(data)
        logger.info("Loaded %d block(s) from %s", len(blocks), path)
        return blocks

    def load(self, data: dict[str, Any] | None) -> list[Block]:
        """
        Load blocks from parsed definition data.

        Args:
            data: Mapping with a ``blocks`` list

        Returns:
            The created blocks in definition order

        Raises:
            BlockDefinitionError: If the data is malformed or references
                an unknown block or class
        """
        if not data:
            return []
        if not isinstance(data, dict):
            raise _invalid("top level must be a mapping")

        entries = data.get("blocks", [])
        if not isinstance(entries, list):
            raise _invalid("'blocks' must be a list")

        existing = {block.name for block in self.registry.blocks()}
        created: list[tuple[Block, dict[str, Any]]] = []
        try:
            for entry in entries:
                if not isinstance(entry, dict) or "name" not in entry:
                    raise _invalid("each block needs a 'name'")
                created.append((self._create_block(entry), entry))

            for block, entry in created:
                self._link_block(block, entry)
        except Exception:
            # Nothing from a failed load stays registered.
            for block in self.registry.blocks():
                if block.name not in existing:
                    self.registry.remove(block.name)
            raise

        return [block for block, _ in created]

    def _create_block(self, data: dict[str, Any]) -> Block:
        """Create a block with its classes, groups and states."""
        name = _name(data["name"], "block name")
        try:
            block = Block(name, self.registry)
        except ValueError as e:
            raise BlockDefinitionError(str(e)) from e

        classes = data.get("classes") or {}
        if not isinstance(classes, dict):
            raise _invalid(f"classes of block '{name}' must be a mapping")

        for class_name, class_data in classes.items():
            cls = block.ensure_class(_name(class_name, f"class of block '{name}'"))
            self._populate_class(cls, class_data or {})

        return block

    def _populate_class(self, cls: BlockClass, data: dict[str, Any]) -> None:
        """Create the state groups and states of a class."""
        if not isinstance(data, dict):
            raise _invalid(f"class '{cls.ref}' must be a mapping")

        states = data.get("states") or {}
        if not isinstance(states, dict):
            raise _invalid(f"states of class '{cls.ref}' must be a mapping")

        for group_name, values in states.items():
            group = cls.ensure_group(_name(group_name, f"group of class '{cls.ref}'"))
            if not values:
                group.ensure_state()
                continue
            if not isinstance(values, list):
                raise _invalid(f"states of group '{group.ref}' must be a list")
            for value in values:
                group.ensure_state(_name(value, f"state of group '{group.ref}'"))

    def _link_block(self, block: Block, data: dict[str, Any]) -> None:
        """Wire the block's and its classes' inheritance links."""
        extends = data.get("extends")
        if extends is not None:
            base = self.registry.get(_name(extends, f"extends of block '{block.name}'"))
            if base is None:
                raise BlockDefinitionError(
                    ErrorMessages.UNKNOWN_BLOCK.format(name=extends, owner=block.name)
                )
            block.base = base

        for class_name, class_data in (data.get("classes") or {}).items():
            target = (class_data or {}).get("extends")
            if target is not None:
                cls = block.get_class(class_name)
                assert cls is not None
                cls.base = self._find_class(_name(target, f"extends of class '{cls.ref}'"), cls)

    def _find_class(self, target: str, owner: BlockClass) -> BlockClass:
        """Resolve ``block.class`` (or a bare class name in the owner's block)."""
        block_name, dot, class_name = target.partition(".")
        if not dot:
            block_name, class_name = owner.block.name, target

        block = self.registry.get(block_name)
        if block is None:
            raise BlockDefinitionError(
                ErrorMessages.UNKNOWN_BLOCK.format(name=block_name, owner=owner.ref)
            )
        cls = block.get_class(class_name)
        if cls is None:
            raise BlockDefinitionError(
                ErrorMessages.UNKNOWN_CLASS.format(ref=target, owner=owner.ref)
            )
        return cls


def _invalid(detail: str) -> BlockDefinitionError:
    return BlockDefinitionError(ErrorMessages.INVALID_DEFINITION.format(detail=detail))


def _name(value: Any, what: str) -> str:
    """
    Check that a definition name is a string.

    YAML reads bare ``on``/``off``/``yes``/``no`` and numbers as non-strings;
    these must be quoted in the definition file.
    """
    if not isinstance(value, str):
        raise _invalid(f"{what} must be a string, got {value!r}; quote it in YAML")
    return value
