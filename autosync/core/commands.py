"""Running external commands (hugo, git) with logged output."""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from autosync.core.models import CommandError

logger = logging.getLogger(__name__)

CleanupCallback = Callable[[CommandError], None]


class CommandRunner:
    """Runs a command in a given directory and raises CommandError on failure.

    There is no retry and no timeout; the call blocks until the command exits.
    """

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Optional[Path] = None,
        on_error: Optional[CleanupCallback] = None,
    ) -> str:
        """Run ``command args...`` and return its combined output.

        Args:
            command: Executable name or path
            args: Arguments passed to the executable
            cwd: Working directory for the command
            on_error: Cleanup called with the error before it is raised.
                It can not suppress the error.

        Returns:
            Combined stdout and stderr

        Raises:
            CommandError: If the command can't be started or exits non-zero
        """
        logger.info("👉🏼 %s", " ".join([command, *args]))

        try:
            completed = subprocess.run(
                [command, *args],
                cwd=str(cwd) if cwd is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            error = CommandError(command, args, None, str(e))
        else:
            if completed.returncode == 0:
                if completed.stdout:
                    logger.info("✅ %s", completed.stdout.rstrip("\n"))
                return completed.stdout
            error = CommandError(command, args, completed.returncode, completed.stdout or "")

        if on_error is not None:
            on_error(error)
        raise error
