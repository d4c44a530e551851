# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_name(default: str = "app") -> str:
    """Returns the name the current program was started as."""
    script = sys.argv[0] if sys.argv else ""
    if not script or script == "-c":
        return default
    name = os.path.basename(script)
    if name == "__main__.py":
        return os.path.basename(os.path.dirname(os.path.abspath(script))) or default
    return name


CONTAINER_RUNTIMES = ("docker", "kubepods", "containerd", "podman")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    """True when the cgroup of PID 1 names a container runtime."""
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(runtime in content for runtime in CONTAINER_RUNTIMES)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    console_log_level: int = logging.DEBUG,
    file_log_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Route the "argbind" logger to the console and, optionally, a file.

    Argbind never installs handlers on import. Only the "argbind" logger is
    touched: its handlers are replaced on every call and it stops propagating,
    so the application's root logging setup is left alone.

    Args:
        mode (str | None):
            "cli" for Rich console output, "json" for one JSON object per line.
            Defaults to `ARGBIND_LOG_MODE`, then to "json" inside a container
            and "cli" elsewhere.
        log_filename (str | None): Also append records to this file.
        json_log_to_file (bool): Format file records as JSON instead of text.
        console_log_level (int): Minimum level shown on the console.
        file_log_level (int): Minimum level written to the file.

    Returns:
        logging.Logger: The configured "argbind" logger.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("ARGBIND_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )
    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    handlers = [console_handler]
    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        handlers.append(file_handler)

    argbind_logger = logging.getLogger("argbind")
    for handler in argbind_logger.handlers:
        handler.close()
    argbind_logger.handlers[:] = handlers
    argbind_logger.setLevel(min(handler.level for handler in handlers))
    argbind_logger.propagate = False
    argbind_logger.debug("Logging initialized in %r mode.", mode)
    return argbind_logger
