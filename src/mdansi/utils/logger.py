"""Logger lookup for mdansi modules.

Every mdansi logger hangs off the ``mdansi`` root so applications can tune
the whole library with one ``logging.getLogger("mdansi")`` call. mdansi only
emits DEBUG records and installs no handlers:

- ``mdansi.formatters.base``: session resets, sink replacement, compaction

Example:
    >>> import logging
    >>> logging.getLogger("mdansi").setLevel(logging.DEBUG)
    >>> get_logger("mdansi.formatters.base").name
    'mdansi.formatters.base'
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "mdansi"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the mdansi namespace.

    Module names (``__name__``) already under ``mdansi`` are used as-is;
    anything else becomes a child of the root, so ``"lexer"`` and
    ``"mdansi.lexer"`` name the same logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME:
        return root
    return root.getChild(name.removeprefix(ROOT_LOGGER_NAME + "."))
