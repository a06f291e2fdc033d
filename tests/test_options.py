"""
Tests for compiler options.
"""

import pytest

from chuk_css_blocks.constants import OutputMode
from chuk_css_blocks.errors import UnsupportedOutputModeError
from chuk_css_blocks.options import OptionsReader, resolve_output_mode


class TestOptionsReader:
    """Tests for OptionsReader."""

    def test_defaults(self):
        """BEM is the default naming convention."""
        assert OptionsReader().output_mode == OutputMode.BEM

    def test_from_dict(self):
        """Options build from plain dictionaries."""
        assert OptionsReader.from_dict({"output_mode": "BEM"}).output_mode == OutputMode.BEM
        assert OptionsReader.from_dict(None).output_mode == OutputMode.BEM

    def test_from_dict_unsupported(self):
        """Unknown modes are rejected when options are built."""
        with pytest.raises(UnsupportedOutputModeError):
            OptionsReader.from_dict({"output_mode": "SUIT"})

    def test_from_yaml(self, temp_dir):
        """Options load from YAML files."""
        path = temp_dir / "options.yaml"
        path.write_text("output_mode: BEM\n")
        assert OptionsReader.from_yaml(path).output_mode == OutputMode.BEM

    def test_from_empty_yaml(self, temp_dir):
        """An empty file gives the defaults."""
        path = temp_dir / "options.yaml"
        path.write_text("")
        assert OptionsReader.from_yaml(path) == OptionsReader()


class TestResolveOutputMode:
    """Tests for resolve_output_mode."""

    def test_accepts_all_forms(self):
        """Options, enum members and strings all resolve."""
        assert resolve_output_mode(OptionsReader()) == OutputMode.BEM
        assert resolve_output_mode(OutputMode.BEM) == OutputMode.BEM
        assert resolve_output_mode("BEM") == OutputMode.BEM

    def test_rejects_unknown(self):
        """Anything else is a fatal configuration error."""
        with pytest.raises(UnsupportedOutputModeError) as exc_info:
            resolve_output_mode("SUIT")
        assert exc_info.value.mode == "SUIT"
        assert isinstance(exc_info.value, ValueError)
