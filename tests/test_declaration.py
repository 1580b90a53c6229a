"""Tests for field declarations."""

from dataclasses import dataclass

import pytest

from galoisfield.equip.binder import equip, prime_field
from galoisfield.equip.declaration import (
    DeclarationError,
    FieldDeclaration,
    declare,
    storage_attribute,
)


def test_declare_valid():
    decl = declare("Fp", 99991)
    assert isinstance(decl, FieldDeclaration)
    assert decl.type_name == "Fp"
    assert decl.modulus == 99991


def test_declare_bounds():
    assert declare("Fp", 2).modulus == 2
    assert declare("Fp", 2**64 - 1).modulus == 2**64 - 1


def test_missing_modulus():
    with pytest.raises(DeclarationError, match="missing modulus"):
        declare("Fp", None)


@pytest.mark.parametrize("modulus", [0, 1, -7, 2**64])
def test_modulus_out_of_range(modulus):
    with pytest.raises(DeclarationError, match="invalid modulus"):
        declare("Fp", modulus)


@pytest.mark.parametrize("modulus", ["7", 7.0, True])
def test_modulus_not_an_integer(modulus):
    with pytest.raises(DeclarationError, match="invalid modulus"):
        declare("Fp", modulus)


def test_storage_attribute_dataclass():
    @dataclass
    class Fp:
        num: int

    assert storage_attribute(Fp) == "num"


def test_storage_attribute_slots():
    class Fp:
        __slots__ = "num"

    assert storage_attribute(Fp) == "num"


def test_two_fields_rejected():
    @dataclass
    class Pair:
        a: int
        b: int

    with pytest.raises(DeclarationError, match="exactly one value"):
        equip(Pair, 7)


def test_ordered_dataclass_rejected():
    @dataclass(frozen=True, order=True)
    class Fp:
        value: int

    with pytest.raises(DeclarationError, match="order=True"):
        equip(Fp, 7)


def test_plain_class_rejected():
    class Plain:
        def __init__(self, value):
            self.value = value

    with pytest.raises(DeclarationError, match="dataclass or define __slots__"):
        equip(Plain, 7)


def test_bad_declaration_leaves_type_untouched():
    @dataclass(frozen=True)
    class Fp:
        value: int

    with pytest.raises(DeclarationError):
        prime_field(1)(Fp)
    assert not hasattr(Fp, "prime")
    assert not hasattr(Fp, "n")
