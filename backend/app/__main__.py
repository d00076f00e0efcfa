"""
Direct invocation: `python -m app` runs the bootstrap action once.

Checks filesystem permissions and process identity without starting the
web server (`make run`). Fatal bootstrap errors exit with status 1.
"""

import asyncio
import logging
import sys

from app.config import settings
from app.exceptions import BootstrapError
from app.main import setup_logging
from app.services.bootstrap import ApplicationRunner

logger = logging.getLogger("app")


def main() -> int:
    setup_logging()
    runner = ApplicationRunner.from_settings(settings)
    try:
        outcome = asyncio.run(runner.run())
    except BootstrapError as e:
        logger.error("%s: %s", e.message, e.context.get("reason", ""))
        return 1
    logger.info("Appended diagnostic entry to %s", outcome.log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
