import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Prune `*.log` files in `log_dir` down to the `max_files` newest by mtime

    Other files are left alone, and a missing directory is treated as empty.

    Args:
        log_dir (Path): Directory the driver writes its log files to.
        max_files (int, optional): How many log files survive the prune. Defaults to 5.
    """
    by_age = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    for stale in by_age[: max(len(by_age) - max_files, 0)]:
        stale.unlink()


class CustomFormatter(logging.Formatter):
    """File formatter that pads level names so messages line up in columns."""

    def format(self, record):
        record.levelname = f"{record.levelname:<8}"
        return super().format(record)


def configure_logger(
    log_level: int = logging.WARNING, log_dir: Path | None = None, max_log_files: int = 5
) -> list[logging.Handler]:
    """Configures the root logger with a console handler and an optional log file

    The console formatter leaves out the date and time to keep script output readable. When
    `log_dir` is given, a rotating log file named after the current date and time is also
    written there, with full timestamps and padded level names.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | WARNING | ERROR ].
            Defaults to logging.WARNING.
        log_dir (Path | None): Where to store log files. No file is written when None.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        list[logging.Handler]: The handlers installed on the root logger.
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    handlers: list[logging.Handler] = [stream_handler]

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        clean_old_logs(log_dir=log_dir, max_files=max_log_files)

        log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=10 * 1024**2, backupCount=5
        )
        file_handler.setFormatter(
            CustomFormatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
        )
        handlers.append(file_handler)

    # force=True replaces handlers left over from an earlier configuration
    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    return handlers
