"""Run AppleScript through osascript and classify its failures."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from contacts_mcp import config
from contacts_mcp.exceptions import (
    PermissionDeniedError,
    ScriptExecutionError,
    ScriptOutputTooLargeError,
    ScriptTimeoutError,
)

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_MARKER = "Not authorized"
PERMISSION_DENIED_MESSAGE = (
    "Contacts access denied. "
    "Grant permission in System Settings > Privacy & Security > Contacts"
)


def classify_failure(message: str) -> ScriptExecutionError | PermissionDeniedError:
    """Map interpreter error text to the exception that should be raised."""
    if NOT_AUTHORIZED_MARKER in message:
        return PermissionDeniedError(PERMISSION_DENIED_MESSAGE)
    return ScriptExecutionError(message)


class BaseScriptRunner(ABC):
    """Abstract interface to the external scripting interpreter."""

    @abstractmethod
    def run(self, script: str) -> str:
        """Execute ``script`` and return its trimmed standard output."""
        ...

    @abstractmethod
    def open_application(self, name: str) -> None:
        """Launch an application by name without going through the interpreter."""
        ...


class OsascriptRunner(BaseScriptRunner):
    """Execute each script in a fresh ``osascript`` process.

    Args:
        executable: Path or name of the osascript binary.
        launcher: Path or name of the ``open`` binary used to launch apps.
        timeout: Seconds before a script is killed.
        max_output: Largest accepted stdout, in bytes.
    """

    def __init__(
        self,
        executable: str = config.OSASCRIPT_BIN,
        launcher: str = config.OPEN_BIN,
        timeout: float = config.SCRIPT_TIMEOUT,
        max_output: int = config.MAX_OUTPUT_BYTES,
    ):
        self.executable = executable
        self.launcher = launcher
        self.timeout = timeout
        self.max_output = max_output

    def run(self, script: str) -> str:
        logger.debug(f"Running AppleScript: {script.strip()[:200]}...")
        result = self._exec([self.executable, "-e", script])

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.error(f"AppleScript failed: {stderr}")
            raise classify_failure(
                stderr or f"osascript exited with status {result.returncode}"
            )

        # Checked after capture: subprocess.run buffers all of stdout, so this
        # rejects oversized output but does not bound memory.
        stdout = result.stdout or ""
        size = len(stdout.encode("utf-8"))
        if size > self.max_output:
            raise ScriptOutputTooLargeError(
                f"AppleScript output exceeded {self.max_output} bytes ({size} bytes)"
            )
        return stdout.strip()

    def open_application(self, name: str) -> None:
        result = self._exec([self.launcher, "-a", name])
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ScriptExecutionError(
                stderr or f"Failed to open {name} (exit status {result.returncode})"
            )
        logger.info(f"Opened application {name}")

    def _exec(self, args: list[str]) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ScriptTimeoutError(
                f"{args[0]} timed out after {self.timeout:g}s"
            ) from e
        except FileNotFoundError as e:
            raise ScriptExecutionError(
                f"{args[0]} not found; this feature requires macOS"
            ) from e
