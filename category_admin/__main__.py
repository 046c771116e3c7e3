"""Run the API with uvicorn."""

import uvicorn

from category_admin.infrastructure.config import settings


def main() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(
        "category_admin.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
