"""Output and error sinks shared by every component that writes."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

from hi_common.errors import CannotCreateFileError

logger = logging.getLogger(__name__)


class StreamSinks:
    """Current output and error streams for one invocation.

    Both sinks start at the standard streams and can each be redirected to a
    file once. Redirections are never reverted; files opened here are closed
    when the sinks are closed.
    """

    def __init__(self, out: Optional[IO[str]] = None, err: Optional[IO[str]] = None):
        self.original_out: IO[str] = out if out is not None else sys.stdout
        self.original_err: IO[str] = err if err is not None else sys.stderr
        self._out = self.original_out
        self._err = self.original_err
        self._opened: dict[str, IO[str]] = {}

    @property
    def out(self) -> IO[str]:
        return self._out

    @property
    def err(self) -> IO[str]:
        return self._err

    @property
    def out_redirected(self) -> bool:
        return self._out is not self.original_out

    @property
    def err_redirected(self) -> bool:
        return self._err is not self.original_err

    def redirect_out(self, path: str) -> None:
        if self.out_redirected:
            raise RuntimeError("standard output is already redirected")
        self._out = self._open(path)
        logger.debug("Standard output redirected to %s", path)

    def redirect_err(self, path: str) -> None:
        if self.err_redirected:
            raise RuntimeError("standard error is already redirected")
        self._err = self._open(path)
        logger.debug("Standard error redirected to %s", path)

    def _open(self, path: str) -> IO[str]:
        key = os.path.realpath(path)
        handle = self._opened.get(key)
        if handle is not None:
            # -l and -e naming the same file share one handle
            return handle
        try:
            # argv bytes psutil could not decode arrive as lone surrogates;
            # write them back out unchanged, as ps does
            handle = open(path, "w", encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise CannotCreateFileError(
                f"cannot open file '{path}' for writing",
                context={"path": path},
                cause=exc,
            ) from exc
        self._opened[key] = handle
        return handle

    def flush(self) -> None:
        for stream in {id(s): s for s in (self._out, self._err)}.values():
            stream.flush()

    def close(self) -> None:
        """Flush both sinks and close the files opened by redirection."""
        self.flush()
        for handle in self._opened.values():
            handle.close()
        self._opened.clear()

    def __enter__(self) -> "StreamSinks":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
