from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    """A non-suppressed command exited non-zero."""

    def __init__(self, result: CmdResult):
        self.result = result
        super().__init__(
            f"Command failed ({result.returncode}): {_fmt_argv(result.argv)}\n{result.stderr}"
        )

    @property
    def exit_status(self) -> int:
        """Shell-style status: signals map to 128+N, never 0."""
        rc = self.result.returncode
        if rc < 0:
            return 128 - rc
        return rc or 1


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Captures stdout/stderr; both are logged at DEBUG.
    - dry_run logs but does not execute.
    - check=False is how best-effort callers suppress a failure.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError:
        # Mirror the shell: a missing tool is exit status 127.
        result = CmdResult(argv=argv_list, returncode=127, stdout="", stderr=f"{argv_list[0]}: command not found")
    else:
        result = CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout or "", stderr=p.stderr or "")

    if result.stdout:
        logger.debug("STDOUT %s", result.stdout.strip())
    if result.stderr:
        logger.debug("STDERR %s", result.stderr.strip())

    if check and result.returncode != 0:
        raise CommandError(result)

    if result.returncode != 0:
        logger.warning("Ignoring failure (%s): %s", result.returncode, _fmt_argv(argv_list))

    return result
