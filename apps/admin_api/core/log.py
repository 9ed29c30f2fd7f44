import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the API process.

    Uvicorn installs its own handlers; basicConfig is a no-op when the
    root logger is already configured, so only the level is forced.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
