from packer.business_objects import Item
from packer.heuristics.select_next.selector import select_next

def _item(index, weight, price):
    return Item(index=index, weight=weight, currency="€", price=price)

def test_default_order_is_price_desc_then_weight_asc():
    items = [_item(1, 60.02, 74), _item(2, 14.55, 74), _item(3, 3.0, 80), _item(4, 1.0, 10)]
    assert [it.index for it in select_next(items)] == [3, 2, 1, 4]

def test_full_ties_keep_input_order():
    items = [_item(5, 1.0, 10), _item(2, 1.0, 10), _item(9, 1.0, 10)]
    assert [it.index for it in select_next(items)] == [5, 2, 9]

def test_input_is_not_mutated():
    items = [_item(1, 1.0, 1), _item(2, 1.0, 2)]
    select_next(items)
    assert [it.index for it in items] == [1, 2]

def test_price_dominates_weight():
    items = [_item(1, 1.0, 10), _item(2, 50.0, 20), _item(3, 2.0, 30)]
    assert [it.index for it in select_next(items)] == [3, 2, 1]
