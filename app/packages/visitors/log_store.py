"""Append-only visit log file.

Each append is a single unbuffered write to a descriptor opened in append
mode, so concurrent requests add whole lines and never truncate the file.
File I/O runs in a worker thread to keep the event loop free.
"""

import asyncio
from pathlib import Path

import structlog

from infrastructure.operations import OperationResult, OperationStatus

logger = structlog.get_logger()


class VisitLog:
    """Visit log stored in a single text file.

    Args:
        path: Location of the log file. It is created on first append.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._logger = logger.bind(component="visit_log", log_path=str(self.path))

    def _write_line(self, line: str) -> None:
        data = (line + "\n").encode("utf-8")
        with open(self.path, "ab", buffering=0) as fh:
            fh.write(data)

    def _read_text(self) -> str:
        # Bytes are decoded without newline translation; a racing append can
        # leave the trailing line cut mid-character
        return self.path.read_bytes().decode("utf-8", errors="replace")

    async def append(self, line: str) -> OperationResult:
        """Append one line (a trailing newline is added).

        Returns:
            OperationResult.success, or an error result if the write failed
        """
        try:
            await asyncio.to_thread(self._write_line, line)
        except OSError as e:
            self._logger.warning("visit_log_write_failed", error=str(e))
            return OperationResult.transient_error(
                message=f"Could not append to visit log: {str(e)}",
                error_code="WRITE_FAILED",
            )
        except Exception as e:
            self._logger.exception("unexpected_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Unexpected error appending to visit log: {str(e)}",
                error_code="UNEXPECTED_ERROR",
            )
        return OperationResult.success(message="Visit appended")

    async def tail(self, limit: int) -> OperationResult:
        """Read the last ``limit`` lines, oldest first.

        A partial last line written by a concurrent append may be included.
        Undecodable bytes are replaced with U+FFFD.

        Returns:
            OperationResult with the list of lines as data, NOT_FOUND when the
            log file does not exist yet, or an error result if reading failed
        """
        try:
            content = await asyncio.to_thread(self._read_text)
        except FileNotFoundError:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                message="Visit log does not exist yet",
                error_code="LOG_NOT_FOUND",
            )
        except OSError as e:
            self._logger.error("visit_log_read_failed", error=str(e))
            return OperationResult.transient_error(
                message=f"Could not read visit log: {str(e)}",
                error_code="READ_FAILED",
            )

        # Only "\n" ends a record; other separators may appear inside a line
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return OperationResult.success(data=lines[-limit:] if limit > 0 else [])
