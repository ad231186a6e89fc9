"""
Common logging configuration for the backend services.

This module provides centralized logging configuration using loguru. It configures
both console and file-based logging with appropriate formatting, rotation, and
retention policies.

Log Files (under LOG_DIR, default "logs"):
    - {service_name}.log: All logs at configured level (default: INFO)
    - {service_name}-error.log: Only ERROR level logs

Log Rotation:
    - Error logs: Rotate at 10 MB, retain 30 days, compress with zip
    - General logs: Rotate at 50 MB, retain 7 days, compress with zip

Example:
    ```python
    from common.logging import setup_logging

    setup_logging("content-service")

    from loguru import logger
    logger.info("Service started successfully")
    ```
"""

from pathlib import Path
import sys

from loguru import logger

from common.config import get_settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# (file suffix, level or None for LOG_LEVEL, rotation, retention)
FILE_SINKS = (
    ("-error.log", "ERROR", "10 MB", "30 days"),
    (".log", None, "50 MB", "7 days"),
)


def log_file_paths(log_dir: str | Path, service_name: str | None = None) -> dict[str, Path]:
    """Map each file sink's level ("ERROR" or "ALL") to its path under `log_dir`."""
    stem = service_name or "app"
    paths = {}
    for suffix, level, _rotation, _retention in FILE_SINKS:
        name = "error.log" if not service_name and level == "ERROR" else f"{stem}{suffix}"
        paths[level or "ALL"] = Path(log_dir) / name
    return paths


def setup_logging(service_name: str | None = None) -> dict[str, Path]:
    """
    Configure loguru for a service.

    Replaces loguru's default handler with a colourised stdout sink and one
    rotating, zip-compressed file sink per entry in FILE_SINKS.

    Args:
        service_name: Name used for the log files (e.g. "content-service").
            Without it the files are "app.log" and "error.log".

    Returns:
        The file sink paths, keyed as in `log_file_paths`.
    """
    settings = get_settings(service_name)

    logger.remove()
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
    paths = log_file_paths(settings.LOG_DIR, service_name)

    for _suffix, level, rotation, retention in FILE_SINKS:
        logger.add(
            paths[level or "ALL"],
            format=LOG_FORMAT,
            level=level or settings.LOG_LEVEL,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    return paths
