import pytest

from lr0.grammar import Production
from lr0.item import Item, ItemSet

E_PLUS = Production("E", ("E", "+", "T"))
E_T = Production("E", ("T",))


def test_next_symbol():
    item = Item.from_production(E_PLUS)
    assert item.next_symbol() == "E"
    assert item.advance().next_symbol() == "+"
    assert item.advance().advance().advance().next_symbol() is None


def test_complete_item():
    item = Item(E_T, 1)
    assert item.is_complete
    assert item.next_symbol() is None
    with pytest.raises(IndexError):
        item.advance()


def test_empty_production_is_complete_at_start():
    item = Item.from_production(Production("A", ()))
    assert item.is_complete
    assert item.next_symbol() is None


def test_dot_out_of_range():
    with pytest.raises(ValueError):
        Item(E_T, 2)
    with pytest.raises(ValueError):
        Item(E_T, -1)


def test_str():
    assert str(Item(E_PLUS, 1)) == "E → E•+T"
    assert str(Item(E_T, 1)) == "E → T•"


def test_owner_is_part_of_identity():
    ea = Item(Production("E", ("a",)), 0)
    fa = Item(Production("F", ("a",)), 0)
    assert ea != fa
    assert len({ea, fa, Item(Production("E", ("a",)), 0)}) == 2


def test_item_set_is_a_value():
    a = ItemSet([Item(E_PLUS, 0), Item(E_T, 0)])
    b = ItemSet([Item(E_T, 0), Item(E_PLUS, 0)])
    assert a == b
    assert hash(a) == hash(b)
    assert a == {Item(E_PLUS, 0), Item(E_T, 0)}
    assert a != ItemSet([Item(E_T, 0)])
    assert list(a) == sorted([Item(E_PLUS, 0), Item(E_T, 0)])
    assert len(a) == 2
    assert Item(E_T, 0) in a
    assert Item(E_T, 1) not in a


def test_item_set_helpers():
    s = ItemSet([Item(E_PLUS, 1), Item(E_T, 1), Item(E_T, 0)])
    assert s.next_symbols() == {"+", "T"}
    assert s.complete_items() == [Item(E_T, 1)]
    assert s.kernel() == ItemSet([Item(E_PLUS, 1), Item(E_T, 1)])
    assert (s | [Item(E_PLUS, 0)]) == ItemSet([*s, Item(E_PLUS, 0)])
    assert not ItemSet()
