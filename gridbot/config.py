"""
Central configuration for gridbot tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return default


# Default for the CLI --trace switch
TRACE_ENABLED: bool = _env_bool("GRIDBOT_TRACE")

LOG_LEVEL_CHOICES = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_log_level() -> str:
    raw = os.getenv("GRIDBOT_LOG_LEVEL", "WARNING").strip().upper()
    return raw if raw in LOG_LEVEL_CHOICES else "WARNING"


LOG_LEVEL_DEFAULT: str = _env_log_level()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"

# Console prefixes used by the CLI
REPORT_PREFIX: str = "Report: "
ERROR_PREFIX: str = "ERROR: "
MOVE_PREFIX: str = "Move:   "
TURN_PREFIX: str = "Turn:   "


def resolve_log_level(name: str | None = None, verbose: int = 0, quiet: bool = False) -> int:
    """
    Map CLI logging options to a numeric level.

    Priority: explicit name, then -v count (-v=INFO, -vv=DEBUG, -vvv=TRACE),
    then -q (WARNING), then LOG_LEVEL_DEFAULT.
    """
    if name:
        name = name.upper()
        return TRACE if name == "TRACE" else getattr(logging, name)
    if verbose >= 3:
        return TRACE
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    if quiet:
        return logging.WARNING
    return resolve_log_level(LOG_LEVEL_DEFAULT)
