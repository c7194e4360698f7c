"""Entry point for running the Bookmarks API with uvicorn."""
import logging

import uvicorn

from core.config import get_settings


def main() -> None:
    """Configure logging and serve the API."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
