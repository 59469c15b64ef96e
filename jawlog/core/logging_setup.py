"""
Process-wide logging setup.

Called once from `jawlog.main`; gunicorn/uvicorn keep their own access logs
on stdout, application loggers use the same stream.
"""
import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if any(getattr(h, "_jawlog", False) for h in root.handlers):
        root.setLevel(level.upper())
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._jawlog = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper())
