# closure_pi/core/node.py
"""
Plain tagged-union list representation: Node(value, next) | EMPTY.

Same shape as the Church encoding in core.pair, but with direct field
access instead of selector calls. The converters below walk the chain
with a loop, so long lists are fine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

from .pair import EMPTY, _Empty, first, is_empty, make_pair, second


@dataclass(frozen=True, slots=True)
class Node:
    value: Any
    next: Union["Node", _Empty] = EMPTY

    def __post_init__(self) -> None:
        if not (isinstance(self.next, Node) or is_empty(self.next)):
            raise TypeError(
                f"Node.next must be a Node or EMPTY, got {type(self.next).__name__}"
            )


NodeList = Union[Node, _Empty]


def iter_nodes(n: NodeList) -> Iterator[Any]:
    """Yield the values of a Node chain in order."""
    cur = n
    while isinstance(cur, Node):
        yield cur.value
        cur = cur.next


def node_from_pair(p: Any) -> NodeList:
    """Convert an encoded list into a Node chain (EMPTY -> EMPTY)."""
    values = []
    cur = p
    while not is_empty(cur):
        values.append(first(cur))
        cur = second(cur)

    out: NodeList = EMPTY
    for v in reversed(values):
        out = Node(v, out)
    return out


def pair_from_node(n: NodeList) -> Any:
    """Convert a Node chain into an encoded list (EMPTY -> EMPTY)."""
    out: Any = EMPTY
    for v in reversed(list(iter_nodes(n))):
        out = make_pair(v, out)
    return out
