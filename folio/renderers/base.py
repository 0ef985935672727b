"""Rendering backend interface.

A backend knows how to create elements and text leaves in some target
representation, append children, and mount a finished root onto a host.
The node tree is walked once through this interface, so the builder never
depends on a particular rendering library.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union

from folio.nodes import ElementNode, TextNode

H = TypeVar("H")


class RenderBackend(ABC, Generic[H]):
    """Capability set a renderer must provide."""

    key: str = ""

    @abstractmethod
    def create_element(self, tag: str, attributes: dict[str, str], classes: tuple[str, ...]) -> H:
        ...

    @abstractmethod
    def create_text(self, text: str) -> H:
        ...

    @abstractmethod
    def append_child(self, parent: H, child: H) -> None:
        ...

    @abstractmethod
    def mount(self, root: H, target: Optional[Any] = None) -> Any:
        """Attach a rendered root to a host and return the backend's result."""


def render(node: Union[ElementNode, TextNode], backend: RenderBackend[H]) -> H:
    """Render a node and its subtree into backend handles."""
    if isinstance(node, TextNode):
        return backend.create_text(node.text)
    handle = backend.create_element(node.tag, dict(node.attributes), node.classes)
    for child in node.children:
        backend.append_child(handle, render(child, backend))
    return handle


def mount(tree: ElementNode, backend: RenderBackend[H], target: Optional[Any] = None) -> Any:
    """Render a whole tree and mount it onto a host in one step."""
    return backend.mount(render(tree, backend), target)
