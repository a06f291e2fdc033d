#!/usr/bin/env python3
"""
Example: Block inheritance and naming.

Builds two blocks where one extends the other, then shows how states
merge across the inheritance chain and how classes are named in BEM
output.

Usage:
    python examples/inheritance.py
"""

from chuk_css_blocks import Block, OptionsReader, StyleRegistry


def main() -> None:
    """Demonstrate inheritance-aware resolution."""
    print("CHUK CSS Blocks Inheritance Demo")
    print("=" * 40)
    print()

    registry = StyleRegistry()
    opts = OptionsReader()

    # Base block: a nav with a size group and a boolean flag
    base = Block("base", registry)
    nav = base.ensure_class("nav")
    nav.ensure_state("size", "small")
    nav.ensure_state("size", "large")
    nav.ensure_state("enabled")

    # Theme block extends base and redefines one size
    theme = Block("theme", registry)
    theme.base = base
    theme_nav = theme.ensure_class("nav")
    theme_nav.ensure_state("size", "large")
    theme_nav.ensure_state("size", "huge")

    print("Resolved sizes on theme.nav:")
    for name, state in theme_nav.resolve_states("size").items():
        print(f"  {name}: from {state.block.name} -> .{state.css_class(opts)}")
    print()

    print("Boolean states on base.nav:")
    for state in nav.boolean_states():
        print(f"  {state.as_source()}")
    print()

    for block in registry.blocks():
        for line in block.debug(opts):
            print(line)


if __name__ == "__main__":
    main()
