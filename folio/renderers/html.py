"""HTML rendering backend and host document.

HtmlBackend serialises a node tree to markup. Text leaves and attribute
values are escaped with markupsafe, so configuration text is never
interpreted as HTML. HtmlDocument is the host page (a Jinja2 shell with the
stylesheet in <head>); mounting appends the rendered root to its body.
"""

import logging
from typing import Optional, Union

from jinja2 import BaseLoader, Environment, TemplateError
from markupsafe import Markup, escape

from .base import RenderBackend

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{{ title }}</title>
{% if stylesheet %}
    <style>
{{ stylesheet | safe }}
    </style>
{% endif %}
</head>
<body>
{% for fragment in body %}
{{ fragment }}
{% endfor %}
</body>
</html>
"""


class HtmlElement:
    """Mutable element handle used while a tree is being rendered."""

    def __init__(self, tag: str, attributes: dict[str, str], classes: tuple[str, ...]):
        self.tag = tag
        self.attributes = attributes
        self.classes = classes
        self.children: list[Union["HtmlElement", Markup]] = []

    def to_markup(self) -> Markup:
        attrs = []
        if self.classes:
            attrs.append(Markup(' class="{}"').format(" ".join(self.classes)))
        for name, value in self.attributes.items():
            attrs.append(Markup(' {}="{}"').format(name, value))
        opening = Markup("<{}{}>").format(self.tag, Markup("").join(attrs))
        if self.tag in VOID_ELEMENTS:
            return opening
        inner = Markup("").join(
            child.to_markup() if isinstance(child, HtmlElement) else child
            for child in self.children
        )
        return opening + inner + Markup("</{}>").format(self.tag)


class HtmlDocument:
    """Host HTML page that rendered trees are mounted onto."""

    def __init__(self, title: str = "", stylesheet: str = "", lang: str = "en"):
        self.title = title
        self.stylesheet = stylesheet
        self.lang = lang
        self.body: list[Markup] = []
        self.env = Environment(
            loader=BaseLoader(),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def append(self, fragment: Markup) -> None:
        """Append a rendered fragment to the end of <body>."""
        self.body.append(Markup(fragment))

    def render(self) -> str:
        """Render the complete document."""
        try:
            template = self.env.from_string(DOCUMENT_TEMPLATE)
            return template.render(
                title=self.title,
                stylesheet=self.stylesheet,
                lang=self.lang,
                body=self.body,
            )
        except TemplateError as e:
            raise ValueError(f"Document rendering error: {e}")


class HtmlBackend(RenderBackend[Union[HtmlElement, Markup]]):
    """Renders nodes to HTML markup."""

    key = "html"

    def create_element(self, tag: str, attributes: dict[str, str], classes: tuple[str, ...]) -> HtmlElement:
        return HtmlElement(tag, attributes, classes)

    def create_text(self, text: str) -> Markup:
        return escape(text)

    def append_child(self, parent: HtmlElement, child: Union[HtmlElement, Markup]) -> None:
        if parent.tag in VOID_ELEMENTS:
            raise ValueError(f"<{parent.tag}> cannot have children")
        parent.children.append(child)

    def mount(self, root: Union[HtmlElement, Markup], target: Optional[HtmlDocument] = None) -> Union[HtmlDocument, Markup]:
        """Append the markup to a document body, or return it without a document."""
        markup = root.to_markup() if isinstance(root, HtmlElement) else root
        if target is None:
            return markup
        target.append(markup)
        logger.debug(f"Mounted {len(markup)} chars of markup onto document '{target.title}'")
        return target
