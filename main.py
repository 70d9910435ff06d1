import uvicorn

from pixelgallery.core.config import settings
from pixelgallery.core.logging_config import configure_logging


def main():
    """Main entry point to run the application."""
    configure_logging(settings.log_level)
    uvicorn.run(
        "pixelgallery.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
