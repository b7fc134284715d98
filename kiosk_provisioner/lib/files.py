from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

# Files we edit in place may hold non-UTF-8 bytes; they must round-trip untouched.
TEXT_ERRORS = "surrogateescape"


def write_file(path: Path, contents: str, *, mode: int | None = None, dry_run: bool = False) -> None:
    """Overwrite ``path`` with ``contents``, creating parent directories."""
    if dry_run:
        logger.info("Would write %s", str(path))
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    if mode is not None:
        os.chmod(path, mode)
    logger.info("Wrote %s", str(path))


def strip_managed_blocks(text: str, start_marker: str, end_marker: str) -> str:
    """Remove every region from a start-marker line through the next end-marker line.

    A start marker without a matching end marker removes through end of text.
    """
    kept: list[str] = []
    inside = False
    for line in text.splitlines(keepends=True):
        if not inside and start_marker in line:
            inside = True
            continue
        if inside:
            if end_marker in line:
                inside = False
            continue
        kept.append(line)
    return "".join(kept)


def replace_managed_block(
    path: Path,
    block: str,
    *,
    start_marker: str,
    end_marker: str,
    dry_run: bool = False,
) -> str:
    """Replace the managed block in ``path`` with ``block`` (appended at the end).

    Content outside the markers is preserved. Returns the new file text.
    """
    current = path.read_text(encoding="utf-8", errors=TEXT_ERRORS) if path.exists() else ""
    kept = strip_managed_blocks(current, start_marker, end_marker)
    if kept and not kept.endswith("\n"):
        kept += "\n"
    if not block.endswith("\n"):
        block += "\n"
    updated = kept + block

    if dry_run:
        logger.info("Would update managed block in %s", str(path))
        return updated

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(updated, encoding="utf-8", errors=TEXT_ERRORS)
    logger.info("Updated managed block in %s", str(path))
    return updated


def set_ini_values(path: Path, values: Mapping[str, str], *, dry_run: bool = False) -> bool:
    """Rewrite existing ``key = value`` lines in place.

    Keys that do not already appear in the file are left out, as a sed
    substitution would. Returns False when the file does not exist.
    """
    if not path.exists():
        logger.info("No %s; leaving settings untouched", str(path))
        return False

    lines = path.read_text(encoding="utf-8", errors=TEXT_ERRORS).splitlines(keepends=True)
    patterns = {k: re.compile(rf"^[ \t]*{re.escape(k)}[ \t]*=.*$") for k in values}

    out: list[str] = []
    for line in lines:
        body = line.rstrip("\r\n")
        ending = line[len(body):]
        for key, pat in patterns.items():
            if pat.match(body):
                body = f"{key} = {values[key]}"
                break
        out.append(body + ending)

    if dry_run:
        logger.info("Would set %s in %s", ", ".join(f"{k}={v}" for k, v in values.items()), str(path))
        return True

    path.write_text("".join(out), encoding="utf-8", errors=TEXT_ERRORS)
    logger.info("Set %s in %s", ", ".join(f"{k}={v}" for k, v in values.items()), str(path))
    return True
