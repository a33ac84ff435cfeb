"""
Server entry point.

Runs the API with uvicorn on the configured host and port:

    python -m src.api
"""

import uvicorn

from src.config.settings import get_settings


def main() -> None:
    """Serve src.api.main:app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
