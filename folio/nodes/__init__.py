"""Node tree: immutable element/text nodes produced by the view builder."""

from .schemas import (
    ElementNode,
    Node,
    TextNode,
    element,
    text,
)

__all__ = [
    "ElementNode",
    "Node",
    "TextNode",
    "element",
    "text",
]
