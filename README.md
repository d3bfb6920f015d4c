# mycontainers

A small collection type, `MyContainer`, and a set of iterables that walk its
items in different orders.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The container

`mycontainers.container.MyContainer` keeps items in the order they were added.
Duplicates are allowed.

```python
from mycontainers.container import MyContainer

c = MyContainer([7, 15, 6])
c.add(1)
c.add(2)

len(c)        # 5
c.size()      # 5
6 in c        # True
c[0]          # 7
list(c)       # [7, 15, 6, 1, 2]
str(c)        # "[7, 15, 6, 1, 2]"

c.remove(6)   # removes every occurrence of 6
c.remove(42)  # raises ValueError("Item not found in container.")
```

## Traversal orders

`mycontainers.iterators` provides six orders. Each is built from a container;
the order of positions is worked out when it is created, and the object can
then be iterated over as often as you like. `len()` of an order gives the
number of items it yields.

```python
from mycontainers.container import MyContainer
from mycontainers.iterators import (
    AscendingOrder,
    DescendingOrder,
    MiddleOutOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
)

c = MyContainer([7, 15, 6, 1, 2])

list(AscendingOrder(c))   # [1, 2, 6, 7, 15]
list(DescendingOrder(c))  # [15, 7, 6, 2, 1]
list(Order(c))            # [7, 15, 6, 1, 2]  (insertion order)
list(ReverseOrder(c))     # [2, 1, 6, 15, 7]
list(SideCrossOrder(c))   # [1, 15, 2, 7, 6]  (smallest, largest, next smallest, ...)
list(MiddleOutOrder(c))   # [6, 15, 1, 7, 2]  (middle, then left and right alternately)
```

The middle item of an even-sized container is the one at index `len // 2`.
Any items that can be compared with `<` work, strings included. An empty
container gives an empty order.

## Demo

A short demonstration prints every order for a container of integers and one
of strings:

```
mycontainers-demo
```

The same can be run with `python -m mycontainers.demo`.