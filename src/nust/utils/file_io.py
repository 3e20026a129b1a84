"""Filesystem helpers used by the panes and the quick-save flow."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable

__all__ = [
    "QUICK_SAVE_PREFIX",
    "read_text_lossy",
    "write_text",
    "ensure_directory",
    "quick_save_filename",
    "default_quick_save_dir",
    "fallback_quick_save_dir",
    "resolve_quick_save_dir",
]

LOGGER = logging.getLogger(__name__)

QUICK_SAVE_PREFIX = "nust"
_QUICK_SAVE_SUBDIR = Path("target") / "quick_saves"
_FALLBACK_DIR_NAME = "nust_quick_saves"


def read_text_lossy(path: Path | str, *, encoding: str = "utf-8") -> str:
    """Return the file contents verbatim, or an empty string when unreadable.

    Line endings are not translated, so ``\\r\\n`` and ``\\r`` survive a
    :func:`write_text` round trip.
    """

    target = Path(path)
    try:
        with target.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("Treating unreadable file %s as empty: %s", target, exc)
        return ""


def write_text(
    path: Path | str,
    content: str,
    *,
    encoding: str = "utf-8",
    create_parents: bool = False,
) -> Path:
    """Write ``content`` to ``path`` verbatim.

    Parent directories are only created when ``create_parents`` is set; any
    ``OSError`` from the write propagates to the caller.
    """

    target = Path(path)
    if create_parents:
        ensure_directory(target.parent)
    with target.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return target


def ensure_directory(path: Path | str) -> Path:
    """Create ``path`` (and its parents) if missing."""

    resolved = Path(path)
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def quick_save_filename(pane_name: str, epoch_seconds: float) -> str:
    """Build the ``nust_<pane>_<seconds>.txt`` quick-save file name."""

    return f"{QUICK_SAVE_PREFIX}_{pane_name}_{int(epoch_seconds)}.txt"


def default_quick_save_dir(cwd: Path | None = None) -> Path:
    base = cwd if cwd is not None else Path(os.getcwd())
    return base / _QUICK_SAVE_SUBDIR


def fallback_quick_save_dir(temp_dir: Path | None = None) -> Path:
    base = temp_dir if temp_dir is not None else Path(tempfile.gettempdir())
    return base / _FALLBACK_DIR_NAME


def resolve_quick_save_dir(
    primary: Path,
    fallback: Path,
    *,
    make_dirs: Callable[[Path], Path] = ensure_directory,
) -> Path:
    """Create the quick-save directory, falling back to ``fallback`` on failure.

    Raises ``OSError`` when neither directory can be created. The raised error
    message names both failures when the fallback differs from the primary.
    """

    try:
        return make_dirs(primary)
    except OSError as primary_err:
        if primary == fallback:
            raise
        LOGGER.warning("Quick save directory %s unavailable: %s", primary, primary_err)
        try:
            return make_dirs(fallback)
        except OSError as fallback_err:
            raise OSError(f"{primary_err}; fallback failed: {fallback_err}") from fallback_err
