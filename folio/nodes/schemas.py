"""Node tree schemas - the immutable output of the view builder.

A tree is made of two node kinds:
- ElementNode: tag, ordered attributes, style class ids, ordered children
- TextNode: a string leaf, never interpreted as markup

Both are frozen pydantic models discriminated on `kind`, so two trees built
from the same input compare equal and serialise with model_dump().
"""

from types import MappingProxyType
from typing import Annotated, Iterator, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TextNode(BaseModel):
    """A text leaf."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class ElementNode(BaseModel):
    """An element with attributes, style classes and children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["element"] = "element"
    tag: str
    attribute_items: tuple[tuple[str, str], ...] = ()
    classes: tuple[str, ...] = ()
    children: tuple["Node", ...] = ()

    @field_validator("attribute_items", mode="before")
    @classmethod
    def _items_from_mapping(cls, value):
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attributes, in insertion order."""
        return MappingProxyType(dict(self.attribute_items))

    def iter(self) -> Iterator[Union["ElementNode", TextNode]]:
        """Walk the subtree in pre-order, starting with this node."""
        yield self
        for child in self.children:
            if isinstance(child, ElementNode):
                yield from child.iter()
            else:
                yield child

    def find_all(
        self,
        tag: Optional[str] = None,
        class_id: Optional[str] = None,
    ) -> list["ElementNode"]:
        """Find descendant elements (including self) by tag and/or class id."""
        found = []
        for node in self.iter():
            if not isinstance(node, ElementNode):
                continue
            if tag is not None and node.tag != tag:
                continue
            if class_id is not None and class_id not in node.classes:
                continue
            found.append(node)
        return found

    def text_content(self) -> str:
        """Concatenate all text leaves of the subtree in document order."""
        return "".join(n.text for n in self.iter() if isinstance(n, TextNode))


Node = Annotated[Union[ElementNode, TextNode], Field(discriminator="kind")]

# Resolve forward reference
ElementNode.model_rebuild()


def text(value: str) -> TextNode:
    """Create a text leaf."""
    return TextNode(text=value)


def element(
    tag: str,
    *children: Union[ElementNode, TextNode, str],
    attrs: Optional[dict[str, str]] = None,
    classes: tuple[str, ...] = (),
) -> ElementNode:
    """Create an element node.

    Plain strings among the children become text leaves, and empty class
    ids are dropped so an unstyled role attaches nothing.
    """
    return ElementNode(
        tag=tag,
        attribute_items=tuple((attrs or {}).items()),
        classes=tuple(c for c in classes if c),
        children=tuple(
            TextNode(text=c) if isinstance(c, str) else c for c in children
        ),
    )
