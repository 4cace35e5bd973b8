"""
Logger utility for the Banker's Safety Checker.

Provides pass-by-pass logging of the safety search with verbosity levels.
"""

from typing import Optional, Sequence
from datetime import datetime


class SafetyLogger:
    """
    Logger for safety evaluation events and verdicts.

    Format: "Pass X: P3 can finish (need [0, 1, 1] <= work [5, 3, 2])"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger.

        Args:
            verbose: Enable verbose output
            log_file: Optional file path for logging
        """
        self.verbose = verbose
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Safety Check Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        # Console output
        print(formatted)

        # File output
        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_pass(self, pass_number: int, work: Sequence[int]) -> None:
        """Log the start of a scan pass."""
        self.log(f"Pass {pass_number}: scanning with work={[int(x) for x in work]}", "debug")

    def log_grant(
        self,
        pass_number: int,
        pid: int,
        need: Sequence[int],
        work: Sequence[int]
    ) -> None:
        """
        Log a process judged able to finish.

        Args:
            pass_number: Current scan pass
            pid: Process index
            need: Remaining need of the process
            work: Work vector the need was checked against
        """
        need_list = [int(x) for x in need]
        work_list = [int(x) for x in work]
        message = f"Pass {pass_number}: P{pid} can finish (need {need_list} <= work {work_list})"
        self.log(message, "debug")

    def log_verdict(self, result) -> None:
        """Log the final safety verdict."""
        self.log(f"Verdict: {result}")

    def log_snapshot(self, state_str: str) -> None:
        """
        Log the snapshot under evaluation.

        Args:
            state_str: Formatted snapshot
        """
        if self.verbose:
            self.log(f"Snapshot:\n{state_str}", "debug")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
