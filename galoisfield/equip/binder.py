"""Bind prime-field arithmetic onto a caller-defined wrapper type.

Usage
-----
    @prime_field(99991)
    @dataclass(frozen=True)
    class Fp:
        value: int

    Fp(3) / Fp(1000000) == Fp(96658)

``equip(cls, p)`` is the same thing without decorator syntax.  The
modulus is captured once, when the type is equipped; every bound
operator reads that captured value.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from galoisfield.arith import field
from galoisfield.equip.declaration import declare, storage_attribute
from galoisfield.logs import get_logger

log = get_logger(__name__)

T = TypeVar("T", bound=type)


def equip(cls: T, p: Any) -> T:
    """Attach field operators for modulus *p* to *cls* and return it."""
    declaration = declare(cls.__name__, p)
    attr = storage_attribute(cls)
    modulus = declaration.modulus

    def raw(element: Any) -> int:
        return getattr(element, attr)

    def binary(name: str, op: Callable[[int, int, int], int]) -> Callable[[Any, Any], Any]:
        def method(self: Any, other: Any) -> Any:
            if not isinstance(other, cls):
                return NotImplemented
            return cls(op(raw(self), raw(other), modulus))

        method.__name__ = name
        method.__qualname__ = f"{cls.__qualname__}.{name}"
        return method

    def __neg__(self: Any) -> Any:
        return cls(field.neg(raw(self), modulus))

    def __eq__(self: Any, other: Any) -> Any:
        if not isinstance(other, cls):
            return NotImplemented
        return field.eq(raw(self), raw(other), modulus)

    def __hash__(self: Any) -> int:
        return hash((cls, field.reduce(raw(self), modulus)))

    def __int__(self: Any) -> int:
        return field.reduce(raw(self), modulus)

    def __repr__(self: Any) -> str:
        return f"{cls.__name__}({raw(self)} mod {modulus})"

    def modinv(self: Any) -> Any:
        """Multiplicative inverse; raises ``InverseUndefined`` for zero."""
        return cls(field.modinv(raw(self), modulus))

    def n(kls: Any, value: int) -> Any:
        """Build an element from *value* reduced modulo the field prime."""
        return kls(field.reduce(value, modulus))

    def zero(kls: Any) -> Any:
        return kls(0)

    def one(kls: Any) -> Any:
        return kls(1)

    cls.prime = modulus
    cls.__add__ = binary("__add__", field.add)
    cls.__sub__ = binary("__sub__", field.sub)
    cls.__mul__ = binary("__mul__", field.mul)
    cls.__truediv__ = binary("__truediv__", field.div)
    cls.__neg__ = __neg__
    cls.__eq__ = __eq__
    cls.__hash__ = __hash__
    cls.__int__ = __int__
    cls.__repr__ = __repr__
    cls.modinv = modinv
    cls.n = classmethod(n)
    cls.zero = classmethod(zero)
    cls.one = classmethod(one)

    log.debug("equipped %s with modulus %d (storage %r)", cls.__name__, modulus, attr)
    return cls


def prime_field(p: Any) -> Callable[[T], T]:
    """Class decorator form of ``equip``: ``@prime_field(2)``."""

    def decorator(cls: T) -> T:
        return equip(cls, p)

    return decorator
