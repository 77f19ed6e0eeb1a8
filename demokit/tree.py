"""A binary tree of integers with in-order traversal."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A tree node holding a value and optional left and right children."""

    value: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def traverse(self):
        """Print the values in order, each followed by a space."""
        self.traverse_func(lambda node: print(node.value, end=" "))

    def traverse_func(self, func):
        """Call ``func`` on every node, in order."""
        if self.left is not None:
            self.left.traverse_func(func)
        func(self)
        if self.right is not None:
            self.right.traverse_func(func)

    def __iter__(self):
        if self.left is not None:
            yield from self.left
        yield self
        if self.right is not None:
            yield from self.right


def create_node(value):
    """Make a leaf node holding ``value``."""
    return Node(value)