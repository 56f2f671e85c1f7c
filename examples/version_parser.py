"""Version header parser showing how callers build and consume Results.

Run with:
    python -m examples.version_parser
"""

import logging
from enum import Enum

from resultkit import Err, Ok, Result
from resultkit.shared.config import Settings
from resultkit.shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


class Version(Enum):
    """Supported header versions."""

    VERSION_1 = 1
    VERSION_2 = 2


def parse_version(version_num: int) -> Result[Version, str]:
    """Parse a version number into a Version."""
    if version_num == 1:
        return Ok(Version.VERSION_1)
    if version_num == 2:
        return Ok(Version.VERSION_2)
    return Err("invalid version")


def describe(version_num: int) -> str:
    """Describe the parse outcome for ``version_num`` in one line."""
    return parse_version(version_num).map_or_else(
        lambda err: f"error parsing header: {err}",
        lambda version: f"working with version: {version.name}",
    )


def main() -> None:
    """Parse the configured version numbers and log each outcome."""
    settings = Settings()
    configure_logging(settings.log_level)

    for version_num in settings.demo_versions:
        version = parse_version(version_num)

        # Checking the variant, then unwrapping
        if version.is_ok():
            logger.info(f"unwrap: working with version: {version.unwrap()}")
        else:
            logger.info(f"unwrap: error parsing header: {version.unwrap_err()}")

        # Mapping both branches
        logger.info(f"map_or_else: {describe(version_num)}")

        # Pattern matching
        match version:
            case Ok(v):
                logger.info(f"patterns: working with version: {v}")
            case Err(err):
                logger.info(f"patterns: error parsing header: {err}")

        # Falling back to a default
        fallback = version.unwrap_or(Version.VERSION_1)
        logger.info(f"unwrap_or: using version {fallback.name}")

    # Unwrapping with the ~ operator
    a = Ok(1)
    b = Ok(2)
    logger.info(f"~ operator: {~a + ~b}")


if __name__ == "__main__":
    main()
