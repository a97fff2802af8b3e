import logging
import sys

# All module loggers are children of one shared parent. Records propagate to
# the host's handlers; the entry points add one stderr handler of their own.
APP_LOGGER_NAME = "solarazel"

_HANDLER_TAG = "_solarazel_handler"


def _ensure_parent_logger_initialized() -> logging.Logger:
    parent = logging.getLogger(APP_LOGGER_NAME)
    if any(getattr(h, _HANDLER_TAG, False) for h in parent.handlers):
        return parent

    sh = logging.StreamHandler(sys.stderr)
    setattr(sh, _HANDLER_TAG, True)
    sh.setLevel(logging.DEBUG)
    sh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    parent.addHandler(sh)
    return parent


def is_level_name(name: str) -> bool:
    return isinstance(logging.getLevelName(name.upper()), int)


def set_level(level: str | int) -> None:
    """Install the package's stderr handler (once) and set its level.

    Called by the CLI and the app only; library use leaves handlers to the host.

    Raises:
        ValueError: For an unknown level name.
    """
    if isinstance(level, str):
        level = level.upper()
    parent = _ensure_parent_logger_initialized()
    parent.setLevel(level)


def get_logger(name: str = __name__) -> logging.Logger:
    if name.startswith(APP_LOGGER_NAME + "."):
        name = name[len(APP_LOGGER_NAME) + 1 :]
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
