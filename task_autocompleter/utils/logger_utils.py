# logger_utils.py - logging messages and timing metrics for the task autocompleter

import os
import time
from datetime import datetime

# Default location of the log file, overridden by configure_logging()
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "task_autocompleter.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger writing timestamped lines to a file and (optionally) the console."""

    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: str = None,
        level: str = "INFO",
        echo: bool = True,
        use_color: bool = True,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.level = level.upper()
        self.echo = echo
        self.use_color = use_color

    def enabled_for(self, level: str) -> bool:
        return LEVELS.get(level, 0) >= LEVELS.get(self.level, 20)

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts) as a DEBUG line.
        Example: [2026-01-01 12:45:02] DEBUG   | suggest done: 0.001s
        """
        self.debug(f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("seed_engine"):
                build_engine()
        It logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, logger: Log, label):
        self.logger = logger
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.logger.metric(f"{self.label} done", round(self.elapsed, 4), "s")


# shared instance used across the package
log = Log()


def configure_logging(path: str = None, level: str = None, echo: bool = None) -> Log:
    """Reconfigure the shared logger in place (so existing imports see the change)."""
    if path is not None:
        log.path = path
    if level is not None:
        log.level = level.upper()
    if echo is not None:
        log.echo = echo
    return log
