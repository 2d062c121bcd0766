"""Main module for BA Journey."""

import logging
import os
import sys

from bajourney.cli import run
from bajourney.config.paths import JourneyPaths


def setup_logging(paths: JourneyPaths | None = None) -> None:
    """Configure logging to file for debugging."""
    paths = paths or JourneyPaths.for_workspace()
    paths.workspace_config.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("BAJOURNEY_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("BA Journey starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the BA Journey application."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
