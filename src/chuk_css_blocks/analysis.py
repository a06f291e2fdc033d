"""
Analysis attributes - authored-form values handed to an optimizer.

An attribute describes the values an element attribute (like ``class``)
can take for a given style: a single constant, absence, or one of
several alternatives.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class ValueConstant(BaseModel):
    """The attribute always carries this exact value."""

    kind: Literal["constant"] = "constant"
    constant: str = Field(..., description="Literal attribute value")

    model_config = {"frozen": True}


class ValueAbsent(BaseModel):
    """The attribute is not present."""

    kind: Literal["absent"] = "absent"

    model_config = {"frozen": True}


OptionValue = Annotated[ValueConstant | ValueAbsent, Field(discriminator="kind")]


class ValueOneOf(BaseModel):
    """The attribute takes exactly one of the listed values."""

    kind: Literal["one_of"] = "one_of"
    one_of: tuple[OptionValue, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}


AttributeValue = Annotated[
    ValueConstant | ValueAbsent | ValueOneOf,
    Field(discriminator="kind"),
]


class Attribute(BaseModel):
    """A named attribute and the values it may take."""

    name: str
    value: AttributeValue

    model_config = {"frozen": True}

    @property
    def is_optional(self) -> bool:
        """Whether the attribute may be left off the element entirely."""
        if isinstance(self.value, ValueAbsent):
            return True
        if isinstance(self.value, ValueOneOf):
            return any(isinstance(v, ValueAbsent) for v in self.value.one_of)
        return False


def constant(value: str) -> ValueConstant:
    """Build a constant value."""
    return ValueConstant(constant=value)


def absent() -> ValueAbsent:
    """Build an absent value."""
    return ValueAbsent()


def one_of(values: list[ValueConstant | ValueAbsent]) -> ValueOneOf:
    """Build a value that is exactly one of ``values``."""
    return ValueOneOf(one_of=tuple(values))
