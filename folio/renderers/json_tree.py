"""JSON rendering backend.

Produces plain dicts that a client-side virtual DOM can hydrate:
elements as {"tag", "attributes", "classes", "children"} and text leaves as
{"text"}. Mounting onto a list appends the root; without a target the root
dict is returned.
"""

from typing import Any, Optional

from .base import RenderBackend


class JsonBackend(RenderBackend[dict[str, Any]]):
    """Renders nodes to JSON-serialisable dicts."""

    key = "json"

    def create_element(self, tag: str, attributes: dict[str, str], classes: tuple[str, ...]) -> dict[str, Any]:
        return {
            "tag": tag,
            "attributes": attributes,
            "classes": list(classes),
            "children": [],
        }

    def create_text(self, text: str) -> dict[str, Any]:
        return {"text": text}

    def append_child(self, parent: dict[str, Any], child: dict[str, Any]) -> None:
        if "children" not in parent:
            raise ValueError("Text nodes cannot have children")
        parent["children"].append(child)

    def mount(self, root: dict[str, Any], target: Optional[list] = None) -> Any:
        if target is None:
            return root
        target.append(root)
        return target
