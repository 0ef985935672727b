"""
Style Registry - maps style declarations to stable class identifiers.

Declarations are registered once and retrieved by id; the view builder only
ever sees the ids. Named style sheets are loaded from JSON files in the
definitions/ directory and applied with portfolio_styles().

The registry must be fully populated before the first build: call
init_style_registry() during process setup instead of relying on lazy
initialisation from concurrent callers.
"""

import hashlib
import json
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .schemas import (
    ClassId,
    PortfolioStyles,
    StyleDeclaration,
    StyleRule,
    StyleSheetDefinition,
    StyleSheetSummary,
)

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"
CLASS_PREFIX = "folio-"


def class_id_for(declaration: StyleDeclaration) -> ClassId:
    """Derive the class id of a declaration from its sorted properties."""
    canonical = json.dumps(declaration.properties, sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha1(canonical.encode("utf-8")).hexdigest()
    return f"{CLASS_PREFIX}{digest[:10]}"


class StyleRegistry:
    """Registry of class declarations, page rules and named style sheets."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._declarations: dict[ClassId, StyleDeclaration] = {}
        self._rules: list[StyleRule] = []
        self._sheets: dict[str, StyleSheetDefinition] = {}
        self._file_map: dict[str, Path] = {}
        self._applied: dict[str, PortfolioStyles] = {}
        self._applied_classes: dict[str, list[ClassId]] = {}
        self._applied_rules: dict[str, list[StyleRule]] = {}
        self._lock = threading.Lock()
        self._loaded = False

    def load(self) -> None:
        """Load all style sheet definitions from JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(f"Style definitions directory not found: {self.definitions_dir}")
            self._loaded = True
            return

        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                sheet = StyleSheetDefinition.model_validate(data)
                self._sheets[sheet.sheet_key] = sheet
                self._file_map[sheet.sheet_key] = json_file
                logger.debug(f"Loaded style sheet: {sheet.sheet_key}")
            except Exception as e:
                logger.error(f"Failed to load style sheet from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._sheets)} style sheets")

    def reload(self) -> None:
        """Forget all registrations and reload sheets from disk."""
        with self._lock:
            self._declarations.clear()
            self._rules.clear()
            self._sheets.clear()
            self._file_map.clear()
            self._applied.clear()
            self._applied_classes.clear()
            self._applied_rules.clear()
            self._loaded = False
        self.load()

    # Declarations
    def register(self, declaration: Union[StyleDeclaration, dict[str, str]]) -> ClassId:
        """Register a declaration and return its class id.

        Registering the same properties again returns the same id.
        """
        if not isinstance(declaration, StyleDeclaration):
            declaration = StyleDeclaration(properties=declaration)
        class_id = class_id_for(declaration)
        with self._lock:
            if class_id not in self._declarations:
                self._declarations[class_id] = declaration
                logger.debug(f"Registered style class {class_id}")
        return class_id

    def get(self, class_id: ClassId) -> Optional[StyleDeclaration]:
        """Get the declaration behind a class id."""
        return self._declarations.get(class_id)

    def add_rule(self, rule: StyleRule) -> None:
        """Add a page-wide rule; duplicates are ignored."""
        with self._lock:
            if rule not in self._rules:
                self._rules.append(rule)

    # Style sheets
    def get_sheet(self, sheet_key: str) -> Optional[StyleSheetDefinition]:
        """Get a style sheet definition by key."""
        self.load()
        return self._sheets.get(sheet_key)

    def list_sheets(self) -> list[StyleSheetSummary]:
        """List style sheet summaries."""
        self.load()
        return [
            StyleSheetSummary(
                sheet_key=s.sheet_key,
                name=s.name,
                description=s.description,
                class_roles=list(s.classes.keys()),
                rule_count=len(s.rules),
                source_file=self._file_map[s.sheet_key].name if s.sheet_key in self._file_map else None,
            )
            for s in sorted(self._sheets.values(), key=lambda s: s.sheet_key)
        ]

    def add_sheet(self, sheet: StyleSheetDefinition) -> None:
        """Add a sheet definition that does not come from disk."""
        self.load()
        self._sheets[sheet.sheet_key] = sheet

    def portfolio_styles(self, sheet_key: str = "default") -> PortfolioStyles:
        """Apply a style sheet and return the class ids for each page role.

        Raises:
            ValueError: If the sheet does not exist
        """
        if sheet_key in self._applied:
            return self._applied[sheet_key]

        sheet = self.get_sheet(sheet_key)
        if sheet is None:
            raise ValueError(
                f"Style sheet '{sheet_key}' not found. "
                f"Available: {sorted(self._sheets.keys())}"
            )

        ids = {}
        for role, declaration in sheet.classes.items():
            if role not in PortfolioStyles.model_fields:
                logger.warning(f"Style sheet '{sheet_key}' declares unknown role '{role}'")
                continue
            ids[role] = self.register(declaration)
        for rule in sheet.rules:
            self.add_rule(rule)

        styles = PortfolioStyles(**ids)
        self._applied[sheet_key] = styles
        self._applied_classes[sheet_key] = list(dict.fromkeys(ids.values()))
        self._applied_rules[sheet_key] = [
            rule for index, rule in enumerate(sheet.rules) if rule not in sheet.rules[:index]
        ]
        logger.info(f"Applied style sheet '{sheet_key}': {len(ids)} classes, {len(sheet.rules)} rules")
        return styles

    # Output
    def stylesheet(self, sheet_key: Optional[str] = None) -> str:
        """Render class rules followed by page rules as CSS text.

        With a sheet key, only the classes and rules of that sheet are
        emitted (the sheet is applied first if needed). Without one, every
        registered class and rule is emitted.

        Raises:
            ValueError: If the sheet does not exist
        """
        if sheet_key is None:
            class_ids = list(self._declarations)
            rules = self._rules
        else:
            self.portfolio_styles(sheet_key)
            class_ids = self._applied_classes[sheet_key]
            rules = self._applied_rules[sheet_key]

        lines = [
            f".{class_id} {{ {self._declarations[class_id].css_body()} }}"
            for class_id in class_ids
        ]
        lines.extend(rule.css() for rule in rules)
        return "\n".join(lines)

    # Stats
    def get_stats(self) -> dict:
        """Get registry statistics."""
        return {
            "sheets_loaded": len(self._sheets),
            "classes_registered": len(self._declarations),
            "rules_registered": len(self._rules),
        }


# Global registry instance
_registry: Optional[StyleRegistry] = None
_registry_lock = threading.Lock()


def get_style_registry() -> StyleRegistry:
    """Get the global style registry instance."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = StyleRegistry()
            _registry.load()
    return _registry


def init_style_registry(sheet_key: str = "default") -> PortfolioStyles:
    """Populate the global registry with a sheet before the first build."""
    return get_style_registry().portfolio_styles(sheet_key)
