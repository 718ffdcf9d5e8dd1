"""
Run the API with uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn

from corenotes.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("server is running on http://localhost:%s", settings.port)
    uvicorn.run(
        "corenotes.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
