import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def get_doclinks_home() -> Path:
    """Get doclinks home directory based on DOCLINKS_HOME or default to ~/.doclinks."""
    env_home = os.environ.get("DOCLINKS_HOME")
    return Path(env_home).expanduser().resolve() if env_home else Path.home() / ".doclinks"


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified doclinks logging.

    The file handler is attached once; later calls only change the level.

    Args:
        home: Directory that receives ``doclinks.log``. If None, derived from environment.
        level: Logging level name (``WARN`` is accepted for ``WARNING``).
    """
    global _CONFIGURED
    root_logger = logging.getLogger("doclinks")
    root_logger.setLevel("WARNING" if level == "WARN" else level)
    if _CONFIGURED:
        return

    if home is None:
        home = get_doclinks_home()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "doclinks.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
