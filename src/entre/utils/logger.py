"""Logger namespace for Entre.

Every module logs under "entre.<module>", so one setting covers the whole
library. Nothing is emitted at INFO or above during a normal scan: pattern
problems are WARNINGs and session tracing (ScanConfig.trace_sessions) is
DEBUG. Handlers are left to the application.

Example:
    >>> import logging
    >>> logging.getLogger("entre").setLevel(logging.DEBUG)  # see session traces
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get the library logger for a module.

    Args:
        name: Module name, usually __name__; names outside the package are
            placed under it

    Returns:
        logging.Logger named "entre" or "entre.<name>"

    Example:
        >>> get_logger("entre.scanner").name
        'entre.scanner'
        >>> get_logger("plugins").name
        'entre.plugins'
    """
    if name != "entre" and not name.startswith("entre."):
        name = f"entre.{name}"
    return logging.getLogger(name)
