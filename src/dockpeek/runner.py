"""
Thin wrapper around the container runtime CLI.

Every call is a one-shot, blocking subprocess. Failures of any kind (binary
missing, non-zero exit, I/O error) surface as CommandError so callers have a
single exception to handle.
"""

import logging
import subprocess
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when the runtime binary cannot be run or exits non-zero."""

    def __init__(self, args_list: Sequence[str], message: str,
                 returncode: Optional[int] = None, stderr: str = ""):
        self.args_list = list(args_list)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class CommandRunner:
    def __init__(self, binary: str = "docker"):
        self.binary = binary

    def run(self, args: Sequence[str], merge_stderr: bool = False) -> str:
        """
        Run `<binary> <args...>` and return its stdout as text.

        With merge_stderr=True the process's stderr is folded into the
        returned text (used for logs, which runtimes split across both
        streams).

        Raises:
            CommandError: the binary is missing, exits non-zero or the
                pipe fails.
        """
        cmd: List[str] = [self.binary, *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            raise CommandError(cmd, f"{self.binary}: command not found") from e
        except OSError as e:
            raise CommandError(cmd, f"{self.binary}: {e}") from e

        if result.returncode != 0:
            stderr = (result.stdout if merge_stderr else result.stderr) or ""
            stderr = stderr.strip()
            message = f"{' '.join(cmd[:2])} exited with status {result.returncode}"
            if stderr:
                message += f": {stderr}"
            raise CommandError(cmd, message, returncode=result.returncode, stderr=stderr)

        return result.stdout or ""
