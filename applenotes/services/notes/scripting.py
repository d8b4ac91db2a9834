"""
AppleScript execution through ``osascript``.

Defines the runner seam (``ScriptRunner``) the Notes service depends on and
the default implementation. The runner never raises for execution failures;
it reports them in the returned ``ScriptResult``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import List, Protocol

from ...exceptions import AppleNotesUnavailable
from .domain import ScriptResult
from .settings import DEFAULT_TIMEOUT

LOGGER = logging.getLogger(__name__)


class ScriptRunner(Protocol):
    """Anything that can execute an AppleScript source string."""

    def __call__(self, script: str) -> ScriptResult: ...


def script_lines(script: str) -> List[str]:
    return [line.strip() for line in script.split("\n") if line.strip()]


def build_command(script: str, osascript: str = "osascript") -> List[str]:
    """One ``-e`` argument per non-empty line, as osascript expects."""
    argv = [osascript]
    for line in script_lines(script):
        argv.extend(["-e", line])
    return argv


def ensure_osascript(osascript: str = "osascript") -> str:
    """Return the resolved path of ``osascript`` or raise AppleNotesUnavailable."""
    path = shutil.which(osascript)
    if not path:
        raise AppleNotesUnavailable(
            f"{osascript} not found; Apple Notes is only reachable on macOS"
        )
    return path


def run_applescript(
    script: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    osascript: str = "osascript",
) -> ScriptResult:
    if not script_lines(script or ""):
        return ScriptResult(
            success=False, output="", error="Empty AppleScript provided"
        )

    argv = build_command(script, osascript)
    LOGGER.info("Executing AppleScript (%d lines)", (len(argv) - 1) // 2)
    try:
        proc = subprocess.run(
            argv,
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or str(e)
        LOGGER.error("AppleScript execution failed (exit %s): %s", e.returncode, detail)
        return ScriptResult(
            success=False, output="", error=f"Failed to execute AppleScript: {detail}"
        )
    except subprocess.TimeoutExpired:
        LOGGER.error("AppleScript timed out after %ss", timeout)
        return ScriptResult(
            success=False,
            output="",
            error=f"Failed to execute AppleScript: timed out after {timeout}s",
        )
    except OSError as e:
        LOGGER.error("Could not start %s: %s", osascript, e)
        return ScriptResult(
            success=False, output="", error=f"Failed to execute AppleScript: {e}"
        )

    return ScriptResult(success=True, output=(proc.stdout or "").strip())


class OsaScriptRunner:
    """``run_applescript`` bound to a timeout and binary."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, osascript: str = "osascript"):
        self.timeout = timeout
        self.osascript = osascript

    def __call__(self, script: str) -> ScriptResult:
        return run_applescript(script, timeout=self.timeout, osascript=self.osascript)
