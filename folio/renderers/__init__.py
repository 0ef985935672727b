"""Rendering backends - mount a node tree onto a host document.

Every renderer implements the same RenderBackend capability set
(create_element, create_text, append_child, mount). The node tree is
walked once through that interface by render()/mount().
"""

from .base import RenderBackend, mount, render
from .html import HtmlBackend, HtmlDocument
from .json_tree import JsonBackend
from .registry import get_backend, list_backends

__all__ = [
    "RenderBackend",
    "HtmlBackend",
    "HtmlDocument",
    "JsonBackend",
    "get_backend",
    "list_backends",
    "mount",
    "render",
]
