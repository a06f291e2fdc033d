"""
Constants and enums for the block system.

No magic strings - reserved names and output modes live here.
"""

from enum import Enum

# Reserved class name for the block's own scope. Also its authored form.
ROOT_CLASS = ":scope"

# Reserved state name for a boolean state (a group with no named sub states).
UNIVERSAL_STATE = "::universal"

CLASS_SELECTOR_PREFIX = "."


class OutputMode(str, Enum):
    """Naming conventions for generated class names."""

    BEM = "BEM"  # block__class--group-state


class ErrorMessages:
    """Standardized error messages."""

    UNSUPPORTED_OUTPUT_MODE = "Output mode '{mode}' is not implemented: naming convention not supported."
    INHERITANCE_CYCLE = "Inheritance cycle detected: {chain}"
    BASE_KIND_MISMATCH = "Cannot inherit a {kind} from a {other}."
    FOREIGN_REGISTRY = "Base '{ref}' belongs to a different registry."
    DUPLICATE_BLOCK = "Block already registered: {name}"
    DUPLICATE_CHILD = "'{owner}' already has a child named '{name}'."
    UNKNOWN_BLOCK = "Unknown block '{name}' referenced by '{owner}'."
    UNKNOWN_CLASS = "Unknown class '{ref}' referenced by '{owner}'."
    INVALID_DEFINITION = "Invalid block definition: {detail}"
