"""Console logging setup for the API process."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger.

    Runs once per process; later calls (a second ``create_app`` in tests,
    uvicorn reloads) leave the existing handlers alone.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
