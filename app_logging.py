import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 1 else default


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def parse_module_levels(raw: str, default_level: int) -> dict[str, int]:
    """
    Parse "fade_in=DEBUG,rainbow_widget=INFO" into {module: level}.

    Malformed entries are skipped; unknown level names fall back to
    default_level.
    """
    levels: dict[str, int] = {}
    for item in (raw or "").split(","):
        entry = item.strip()
        if not entry:
            continue
        module_name, sep, level_name = entry.partition("=")
        module_name = module_name.strip()
        if not sep or not module_name or not level_name.strip():
            logging.getLogger(__name__).warning("Invalid module-level logging entry: %s", entry)
            continue
        levels[module_name] = _level(level_name, default_level)
    return levels


def setup_logging(level_name: str | None = None) -> None:
    """
    Configure root logging; safe to call repeatedly.

    Env vars:
    - RAINBOW_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR (default: INFO)
    - RAINBOW_LOG_FILE: optional path to a log file
    - RAINBOW_LOG_ROTATE_BYTES: max file size before rotation (default: 1048576)
    - RAINBOW_LOG_BACKUP_COUNT: number of rotated files to keep (default: 2)
    - RAINBOW_LOG_MODULE_LEVELS: e.g. "fade_in=DEBUG,rainbow_widget=INFO"
    """
    level = _level(level_name or os.getenv("RAINBOW_LOG_LEVEL", "INFO"), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    log_file = os.getenv("RAINBOW_LOG_FILE", "").strip()
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=_env_int("RAINBOW_LOG_ROTATE_BYTES", 1024 * 1024),
            backupCount=_env_int("RAINBOW_LOG_BACKUP_COUNT", 2),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for module_name, module_level in parse_module_levels(os.getenv("RAINBOW_LOG_MODULE_LEVELS", ""), level).items():
        logging.getLogger(module_name).setLevel(module_level)
        root.debug("Log level override: %s=%s", module_name, logging.getLevelName(module_level))
