"""Portfolio loader - parses configuration text into a validated Portfolio.

The configuration is a YAML document (plain JSON is accepted too, being a
subset of YAML). Parsing and validation fail fast with a ConfigError;
skill references inside projects are left for the view builder to resolve.
"""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from folio.errors import ConfigError, ConfigErrorKind
from .schemas import Portfolio

logger = logging.getLogger(__name__)


def _error_location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def load_portfolio(text: str) -> Portfolio:
    """Parse and validate a portfolio configuration document.

    Args:
        text: Raw YAML or JSON text

    Returns:
        Validated, immutable Portfolio

    Raises:
        ConfigError: MALFORMED for syntax/type problems, MISSING_FIELD
            when a required field is absent
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"Configuration is not valid YAML: {e}",
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"Configuration root must be a mapping, got {type(data).__name__}",
        )

    try:
        portfolio = Portfolio.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        # A missing field is reported in preference to other problems
        missing = [err for err in errors if err["type"] == "missing"]
        if missing:
            field = _error_location(missing[0]["loc"])
            raise ConfigError(
                ConfigErrorKind.MISSING_FIELD,
                f"Missing required field: {field}",
                field=field,
            ) from e
        first = errors[0]
        field = _error_location(first["loc"])
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"Invalid value for {field}: {first['msg']}",
            field=field,
        ) from e

    logger.info(
        f"Loaded portfolio for {portfolio.name}: {len(portfolio.projects)} projects, "
        f"{len(portfolio.languages)} languages, {len(portfolio.technologies)} technologies"
    )
    return portfolio


def load_portfolio_file(path: Union[str, Path]) -> Portfolio:
    """Read a configuration file from disk and load it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"Cannot read configuration file {path}: {e}",
        ) from e
    logger.debug(f"Read configuration from {path}")
    return load_portfolio(text)
