"""Folio - configuration-driven portfolio pages.

This package turns a portfolio configuration into a styled view tree:
- Portfolio and project models (loaded once from YAML/JSON)
- Immutable element/text node trees
- Style registry (declarations -> class identifiers)
- Rendering backends that mount a tree onto a host document
"""

__version__ = "0.1.0"
