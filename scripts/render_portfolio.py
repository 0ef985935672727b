#!/usr/bin/env python3
"""Render a portfolio configuration to a static HTML page.

Usage:
    python scripts/render_portfolio.py config.yaml
    python scripts/render_portfolio.py config.yaml -o dist/index.html --sheet plain

Reads from: a YAML/JSON portfolio configuration
Writes to:  dist/index.html (default)
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from folio.errors import ConfigError, UnresolvedReference
from folio.views.page import write_page


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a portfolio configuration to static HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "config",
        help="Path to the portfolio configuration (YAML or JSON)",
    )
    parser.add_argument(
        "-o", "--output",
        default="dist/index.html",
        help="Output HTML file (default: dist/index.html)",
    )
    parser.add_argument(
        "--sheet",
        default="default",
        help="Style sheet key (default: default)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        output = write_page(args.config, args.output, sheet_key=args.sheet)
    except ConfigError as e:
        print(f"Error: invalid configuration ({e.kind.value}): {e}", file=sys.stderr)
        return 1
    except UnresolvedReference as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
