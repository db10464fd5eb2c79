"""Logger naming for Papyrus.

All Papyrus loggers live under the ``papyrus`` namespace. The lexer reports
each malformed tag at DEBUG level on ``papyrus.lexer.core`` (position and
grammar error) before returning or yielding the TokenizeError, so a host
can trace rejected tags without inspecting the token stream:

    >>> import logging
    >>> logging.getLogger("papyrus").setLevel(logging.DEBUG)

No handlers are installed here; output goes wherever the host routes it.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the papyrus namespace.

    Module names inside the package (``papyrus.lexer.core``) are used as-is;
    anything else is nested under ``papyrus.`` so host code can share the
    same level switch.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'papyrus.mymodule'
    """
    if not (name == "papyrus" or name.startswith("papyrus.")):
        name = f"papyrus.{name}"
    return logging.getLogger(name)
