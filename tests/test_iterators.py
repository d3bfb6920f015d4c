import pytest

from mycontainers.container import MyContainer
from mycontainers.iterators import (
    AscendingOrder,
    DescendingOrder,
    MiddleOutOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
)

ALL_ORDERS = [
    AscendingOrder,
    DescendingOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
    MiddleOutOrder,
]


def test_ascending_order():
    c = MyContainer([3, 1, 5])
    assert list(AscendingOrder(c)) == [1, 3, 5]


def test_descending_order():
    c = MyContainer([3, 1, 5])
    assert list(DescendingOrder(c)) == [5, 3, 1]


def test_insertion_order():
    c = MyContainer([8, 4, 6])
    assert list(Order(c)) == [8, 4, 6]


def test_reverse_order():
    c = MyContainer([8, 4, 6])
    assert list(ReverseOrder(c)) == [6, 4, 8]


def test_side_cross_order():
    c = MyContainer([5, 1, 9, 3, 7])
    assert list(SideCrossOrder(c)) == [1, 9, 3, 7, 5]


def test_middle_out_order_odd():
    c = MyContainer([100, 200, 300, 400, 500])
    assert list(MiddleOutOrder(c)) == [300, 200, 400, 100, 500]


def test_middle_out_order_even():
    c = MyContainer([10, 20, 30, 40])
    assert list(MiddleOutOrder(c)) == [30, 20, 40, 10]


def test_demo_sequences():
    c = MyContainer([7, 15, 6, 1, 2])
    assert list(AscendingOrder(c)) == [1, 2, 6, 7, 15]
    assert list(DescendingOrder(c)) == [15, 7, 6, 2, 1]
    assert list(ReverseOrder(c)) == [2, 1, 6, 15, 7]
    assert list(SideCrossOrder(c)) == [1, 15, 2, 7, 6]
    assert list(MiddleOutOrder(c)) == [6, 15, 1, 7, 2]


@pytest.mark.parametrize("order", ALL_ORDERS)
def test_empty_container_yields_nothing(order):
    view = order(MyContainer())
    assert list(view) == []
    assert len(view) == 0


@pytest.mark.parametrize("order", ALL_ORDERS)
def test_every_order_is_a_permutation(order):
    items = [7, 15, 6, 1, 2, 15, 4]
    view = order(MyContainer(items))
    assert sorted(view) == sorted(items)
    assert len(view) == len(items)


@pytest.mark.parametrize("order", ALL_ORDERS)
def test_single_element(order):
    assert list(order(MyContainer(["only"]))) == ["only"]


def test_strings_ascending_and_descending_are_mirrors():
    words = ["hello", "leon", "amit", "computers", "grand theft auto"]
    c = MyContainer(words)
    ascending = list(AscendingOrder(c))
    assert ascending == sorted(words)
    assert list(DescendingOrder(c)) == ascending[::-1]


def test_side_cross_with_two_elements():
    c = MyContainer([9, 3])
    assert list(SideCrossOrder(c)) == [3, 9]


def test_view_can_be_iterated_twice():
    view = ReverseOrder(MyContainer([8, 4, 6]))
    first = list(view)
    second = list(view)
    assert first == [6, 4, 8]
    assert second == [6, 4, 8]