import uvicorn
from .core.config import settings
from .core.logging import setup_logging


def main() -> None:
    """Run the service on ``HOST``:``PORT`` (default 0.0.0.0:3000)."""
    logger = setup_logging(settings)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run("photostore.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
