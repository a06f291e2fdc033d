"""
Tests for BlockLoader.
"""

import pytest

from chuk_css_blocks.block import StyleRegistry
from chuk_css_blocks.constants import UNIVERSAL_STATE
from chuk_css_blocks.errors import BlockDefinitionError
from chuk_css_blocks.loader import BlockLoader

DEFINITION = """
blocks:
  - name: theme
    extends: base
    classes:
      nav:
        states:
          size: [medium]
      link:
        extends: base.nav
  - name: base
    classes:
      nav:
        states:
          size: [small, large]
          enabled: []
"""


class TestBlockLoader:
    """Tests for loading block definitions."""

    def test_load_file(self, temp_dir):
        """Blocks, classes, groups and states are created."""
        path = temp_dir / "blocks.yaml"
        path.write_text(DEFINITION)
        theme, base = BlockLoader().load_file(path)

        assert base.name == "base"
        nav = base.get_class("nav")
        assert nav.get_groups_names() == {"size", "enabled"}
        assert [s.name for s in nav.get_states("size")] == ["small", "large"]
        assert nav.get_state("enabled").name == UNIVERSAL_STATE

    def test_forward_extends(self, temp_dir):
        """A block may extend one defined later."""
        path = temp_dir / "blocks.yaml"
        path.write_text(DEFINITION)
        theme, base = BlockLoader().load_file(path)
        assert theme.base is base
        assert set(theme.get_class("nav").resolve_states("size")) == {"small", "large", "medium"}

    def test_class_extends(self, temp_dir):
        """Explicit class bases are wired."""
        path = temp_dir / "blocks.yaml"
        path.write_text(DEFINITION)
        theme, base = BlockLoader().load_file(path)
        link = theme.get_class("link")
        assert link.base is base.get_class("nav")
        assert link.resolve_state("enabled") is base.get_class("nav").get_state("enabled")

    def test_class_extends_same_block(self):
        """A bare class name refers to the owning block."""
        (block,) = BlockLoader().load(
            {"blocks": [{"name": "B", "classes": {"button": None, "link": {"extends": "button"}}}]}
        )
        assert block.get_class("link").base is block.get_class("button")

    def test_shared_registry(self):
        """Loaded blocks land in the given registry."""
        registry = StyleRegistry()
        BlockLoader(registry).load({"blocks": [{"name": "B"}]})
        assert "B" in registry

    def test_empty(self):
        """No data gives no blocks."""
        assert BlockLoader().load(None) == []

    def test_unknown_block(self):
        """Extending a missing block is an error."""
        with pytest.raises(BlockDefinitionError, match="Unknown block"):
            BlockLoader().load({"blocks": [{"name": "B", "extends": "missing"}]})

    def test_unknown_class(self):
        """Extending a missing class is an error."""
        with pytest.raises(BlockDefinitionError, match="Unknown class"):
            BlockLoader().load({"blocks": [{"name": "B", "classes": {"nav": {"extends": "B.nope"}}}]})

    def test_duplicate_block(self):
        """Duplicate names are reported as definition errors."""
        with pytest.raises(BlockDefinitionError):
            BlockLoader().load({"blocks": [{"name": "B"}, {"name": "B"}]})

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"blocks": {"name": "B"}},
            {"blocks": [{"classes": {}}]},
            {"blocks": [{"name": "B", "classes": ["nav"]}]},
            {"blocks": [{"name": "B", "classes": {"nav": {"states": {"size": "small"}}}}]},
        ],
    )
    def test_malformed(self, data):
        """Bad shapes raise definition errors."""
        with pytest.raises(BlockDefinitionError):
            BlockLoader().load(data)


class TestDefinitionNames:
    """Tests for name handling in definition files."""

    @pytest.mark.parametrize(
        "text",
        [
            "blocks:\n  - name: yes\n",
            "blocks:\n  - name: B\n    classes:\n      on: {}\n",
            "blocks:\n  - name: B\n    classes:\n      nav:\n        states:\n          on: []\n",
            "blocks:\n  - name: B\n    classes:\n      nav:\n        states:\n          mode: [yes, no]\n",
            "blocks:\n  - name: B\n    extends: off\n",
            "blocks:\n  - name: 42\n",
        ],
    )
    def test_non_string_names_rejected(self, temp_dir, text):
        """YAML booleans and numbers are not silently turned into names."""
        path = temp_dir / "blocks.yaml"
        path.write_text(text)
        with pytest.raises(BlockDefinitionError, match="must be a string"):
            BlockLoader().load_file(path)

    def test_quoted_names(self, temp_dir):
        """Quoted YAML keywords are ordinary names."""
        path = temp_dir / "blocks.yaml"
        path.write_text(
            "blocks:\n  - name: B\n    classes:\n      nav:\n        states:\n"
            "          'on': []\n          mode: ['yes', 'no']\n"
        )
        (block,) = BlockLoader().load_file(path)
        nav = block.get_class("nav")
        assert nav.get_groups_names() == {"on", "mode"}
        assert [s.name for s in nav.get_states("mode")] == ["yes", "no"]


class TestFailedLoad:
    """Tests for loads that fail part way."""

    def test_failed_link_unregisters_blocks(self):
        """A failure while wiring extends leaves nothing registered."""
        registry = StyleRegistry()
        loader = BlockLoader(registry)
        with pytest.raises(BlockDefinitionError):
            loader.load({"blocks": [{"name": "a"}, {"name": "b", "extends": "missing"}]})
        assert len(registry) == 0

        a, b = loader.load({"blocks": [{"name": "a"}, {"name": "b"}]})
        assert registry.blocks() == [a, b]

    def test_failed_create_unregisters_blocks(self):
        """A failure while creating a later block removes earlier ones too."""
        registry = StyleRegistry()
        loader = BlockLoader(registry)
        with pytest.raises(BlockDefinitionError):
            loader.load(
                {"blocks": [{"name": "a"}, {"name": "b", "classes": {"nav": {"states": {"g": "x"}}}}]}
            )
        assert len(registry) == 0

    def test_earlier_loads_survive(self):
        """Blocks from a previous successful load are kept."""
        registry = StyleRegistry()
        loader = BlockLoader(registry)
        (base,) = loader.load({"blocks": [{"name": "base"}]})
        with pytest.raises(BlockDefinitionError):
            loader.load({"blocks": [{"name": "theme", "extends": "missing"}]})
        assert registry.blocks() == [base]

    def test_missing_file(self, temp_dir):
        """An unreadable file is a definition error."""
        with pytest.raises(BlockDefinitionError, match="Cannot read"):
            BlockLoader().load_file(temp_dir / "missing.yaml")

    def test_malformed_yaml(self, temp_dir):
        """Unparseable YAML is a definition error."""
        path = temp_dir / "blocks.yaml"
        path.write_text("blocks: [unclosed\n")
        with pytest.raises(BlockDefinitionError, match="Cannot read"):
            BlockLoader().load_file(path)
