import logging
import sys

from treko.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Named logger writing to stdout with a bracketed prefix, e.g.
    ``treko.login`` -> ``[LOGIN] message``.
    Handlers are attached once per name so repeated imports don't duplicate lines.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        prefix = name.rsplit(".", 1)[-1].upper()
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
