"""Logging to the console and a timestamped file at the same time."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

_INFO_PREFIX = "[INFO] "
_ERROR_PREFIX = "[ERROR] "


class Logger:
    """Writes info lines to stdout and error lines to stderr, both also to a log file."""

    def __init__(self, log_dir: str | os.PathLike[str], verbose: bool = False) -> None:
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError as exc:
            raise OSError(f"ログディレクトリの作成に失敗しました: {exc}") from exc

        stamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.path = Path(log_dir) / f"steam-review_{stamp}.log"
        try:
            self._file: TextIO | None = open(self.path, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"ログファイルのオープンに失敗しました: {exc}") from exc
        self._verbose = bool(verbose)

    @property
    def verbose_enabled(self) -> bool:
        """Whether verbose messages are written."""
        return self._verbose

    def _log(self, stream: TextIO, prefix: str, message: object) -> None:
        # Frame 2 is whoever called the public logging method.
        caller = sys._getframe(2)
        location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
        now = datetime.now().strftime("%Y/%m/%d %H:%M:%S.%f")
        text = str(message)
        if not text.endswith("\n"):
            text += "\n"
        line = f"{prefix}{now} {location}: {text}"
        stream.write(line)
        stream.flush()
        if self._file is not None:
            self._file.write(line)
            self._file.flush()

    def info(self, message: object) -> None:
        """Log an informational message."""
        self._log(sys.stdout, _INFO_PREFIX, message)

    def error(self, message: object) -> None:
        """Log an error message."""
        self._log(sys.stderr, _ERROR_PREFIX, message)

    def fatal(self, message: object) -> None:
        """Log an error message and end the program with status 1."""
        self._log(sys.stderr, _ERROR_PREFIX, message)
        raise SystemExit(1)

    def verbose(self, message: object) -> None:
        """Log an informational message only when verbose output is on."""
        if self._verbose:
            self._log(sys.stdout, _INFO_PREFIX, message)

    def echo(self, message: object) -> None:
        """Write *message* to stdout as is, without touching the log file."""
        sys.stdout.write(str(message))
        sys.stdout.flush()

    def close(self) -> None:
        """Close the log file; later messages go to the console only."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()