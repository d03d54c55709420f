"""FastAPI server entrypoint.

Run with `python -m src.api.main` or `uvicorn src.api.app:app --host 0.0.0.0 --port 3000`.
"""

from __future__ import annotations

import logging

import uvicorn

from src.api.api_config import get_api_config
from src.common.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    config = get_api_config()
    logger.info("Starting %s on http://%s:%s", config.api_name, config.host, config.port)
    uvicorn.run("src.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
