"""
Compiler options - the configuration consumed at naming time.

Options can be built in code or read from a YAML file:

    output_mode: BEM
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from chuk_css_blocks.constants import OutputMode
from chuk_css_blocks.errors import UnsupportedOutputModeError

logger = logging.getLogger(__name__)


class OptionsReader(BaseModel):
    """Read-only compiler options."""

    output_mode: OutputMode = Field(
        default=OutputMode.BEM,
        description="Naming convention for generated class names",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> OptionsReader:
        """
        Build options from a plain dictionary.

        Args:
            data: Option values; None or empty gives the defaults

        Returns:
            Validated options
        """
        data = data or {}
        mode = data.get("output_mode", OutputMode.BEM.value)
        return cls(output_mode=resolve_output_mode(mode))

    @classmethod
    def from_yaml(cls, path: Path) -> OptionsReader:
        """
        Load options from a YAML file.

        Args:
            path: Path to the options file

        Returns:
            Validated options
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded options from %s", path)
        return cls.from_dict(data)


def resolve_output_mode(opts: OptionsReader | OutputMode | str) -> OutputMode:
    """
    Normalize anything that names an output mode.

    Args:
        opts: Options, an output mode, or a raw mode string

    Returns:
        The matching output mode

    Raises:
        UnsupportedOutputModeError: If the mode has no implementation
    """
    if isinstance(opts, OptionsReader):
        opts = opts.output_mode
    if isinstance(opts, OutputMode):
        return opts
    try:
        return OutputMode(opts)
    except ValueError:
        raise UnsupportedOutputModeError(opts) from None
