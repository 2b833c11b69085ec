"""
i18n JavaScript export - deploys .properties resource bundles as $.msg jQuery scripts.
"""

import sys

from .main import run


def main() -> None:
    """Console entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        import logging

        logger = logging.getLogger(__name__)
        logger.info("Export cancelled by user")
        sys.exit(1)


__all__ = ["main", "run"]
