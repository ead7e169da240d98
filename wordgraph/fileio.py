"""File output helpers."""

import os
from pathlib import Path
import stat
import tempfile


def _file_mode(target: Path) -> int:
    """Mode for the written file: the existing one's, else what ``open`` gives."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: str | Path, text: str) -> Path:
    """Write text so readers see either the old file or the complete new one.

    The content goes to a temporary file in the target directory which then
    replaces the target in one rename. The target keeps its permissions; a
    new file gets the same mode a plain ``open(path, "w")`` would.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    mode = _file_mode(target)

    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target
