import dataclasses
from decimal import Decimal

import pytest

from packer.business_objects import Item, Parcel, StateValidationError, PackerError
from packer.planning import RuntimeParcel


def test_item_is_immutable():
    it = Item(index=1, weight=15.3, currency="€", price=34.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        it.weight = 1.0


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(index=0, weight=1.0, currency="€", price=1.0),
        dict(index=1, weight=-1.0, currency="€", price=1.0),
        dict(index=1, weight=1.0, currency="", price=1.0),
        dict(index=1, weight=1.0, currency="€", price=-0.5),
    ],
)
def test_item_rejects_invalid_fields(kwargs):
    with pytest.raises(StateValidationError):
        Item(**kwargs)


def test_parcel_rejects_duplicate_indices():
    a = Item(index=1, weight=1.0, currency="€", price=1.0)
    b = Item(index=1, weight=2.0, currency="€", price=2.0)
    with pytest.raises(StateValidationError):
        Parcel(capacity=10, items=(a, b))


def test_parcel_rejects_negative_capacity():
    with pytest.raises(StateValidationError):
        Parcel(capacity=-1, items=())


def test_validation_error_is_a_packer_error():
    assert issubclass(StateValidationError, PackerError)
    assert issubclass(StateValidationError, ValueError)


def test_item_numbers_are_stored_as_decimal():
    it = Item(index=1, weight=15.3, currency="€", price=34)
    assert it.weight == Decimal("15.3")
    assert it.price == Decimal("34")


def test_runtime_parcel_compares_exactly():
    rt = RuntimeParcel(capacity=10)
    for w in ("3.04", "4.99", "1.97"):
        assert rt.place(Item(index=1, weight=Decimal(w), currency="€", price=1))
    assert rt.loaded == 10
    assert not rt.can_fit(Item(index=2, weight=Decimal("0.01"), currency="€", price=1))
