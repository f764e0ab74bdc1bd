"""
Run the server: ``python -m amama``.
"""

from __future__ import annotations

import logging

import uvicorn

from amama.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Serving on %s:%d (data file: %s)",
        settings.host,
        settings.port,
        settings.data_file,
    )
    uvicorn.run(
        "amama.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
