"""Field declarations.

A declaration names the wrapper type and the prime it is reduced by.
It is validated once, at type-definition time; a bad declaration is
fatal before any arithmetic can happen.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from galoisfield.config import MIN_MODULUS, WORD_MODULUS


class DeclarationError(ValueError):
    """Raised when a field declaration is malformed."""


class FieldDeclaration(BaseModel):
    """The single option a field type recognises: its modulus."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    # Unsigned 64-bit prime; primality is trusted.
    modulus: StrictInt = Field(ge=MIN_MODULUS, lt=WORD_MODULUS)


def declare(type_name: str, modulus: Any) -> FieldDeclaration:
    """Validate a declaration, raising ``DeclarationError`` on bad input."""
    if modulus is None:
        raise DeclarationError(f"{type_name}: missing modulus declaration")
    try:
        return FieldDeclaration(type_name=type_name, modulus=modulus)
    except ValidationError as exc:
        problems = "; ".join(err["msg"] for err in exc.errors())
        raise DeclarationError(
            f"{type_name}: invalid modulus {modulus!r} ({problems})"
        ) from exc


def storage_attribute(cls: type) -> str:
    """Return the name of the one attribute a wrapper type stores.

    The type must be a dataclass with exactly one field (and no
    ``order=True``), or declare ``__slots__`` with exactly one name.
    """
    if dataclasses.is_dataclass(cls):
        # Ordering on raw stored values would disagree with congruence.
        if cls.__dataclass_params__.order:
            raise DeclarationError(
                f"{cls.__name__}: field elements are unordered, drop order=True"
            )
        names = [f.name for f in dataclasses.fields(cls)]
    elif "__slots__" in cls.__dict__:
        slots = cls.__dict__["__slots__"]
        names = [slots] if isinstance(slots, str) else list(slots)
    else:
        raise DeclarationError(
            f"{cls.__name__}: wrapper type must be a dataclass or define __slots__"
        )
    if len(names) != 1:
        raise DeclarationError(
            f"{cls.__name__}: wrapper type must hold exactly one value, found {names}"
        )
    return names[0]
