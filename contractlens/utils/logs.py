from __future__ import annotations
import logging

NOISY_LOGGERS = [
    "pypdf",
    "PIL",
    "urllib3",
    "urllib3.connectionpool",
    "google",
    "google.auth",
    "grpc",
]


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup for the CLI; library code only calls getLogger."""
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)
    logging.captureWarnings(True)
