"""
Command line entry point: ``python -m todo_api`` or ``todo-api``
"""
import asyncio
import logging
import sys

from todo_api.core.config import get_settings
from todo_api.core.exceptions import StartupError
from todo_api.server import serve

logger = logging.getLogger("todo_api")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Line-oriented diagnostics on stderr"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    try:
        asyncio.run(serve(settings))
    except StartupError as e:
        logger.critical(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
