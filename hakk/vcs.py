"""Git repository initialisation for freshly generated projects."""

from __future__ import annotations

from pathlib import Path

from hakk.errors import GitInitError
from hakk.utils import run_command

NO_GIT_HINT = "Try option --no-git to disable this step."


async def init_repository(path: str | Path) -> None:
    """Run ``git init`` inside *path* and wait for it to finish.

    Raises:
        GitInitError: If git cannot be launched or exits with a non-zero
            status.
    """
    cmd = ["git", "init"]
    cmd_str = " ".join(cmd)

    try:
        returncode, _stdout, stderr = await run_command(cmd, cwd=path)
    except OSError as exc:
        raise GitInitError(
            f"Executing git failed: {exc}. {NO_GIT_HINT}", command=cmd_str
        ) from exc

    if returncode != 0:
        raise GitInitError(
            f"Executing git failed (exit {returncode}). {NO_GIT_HINT}",
            command=cmd_str,
            stderr=stderr,
        )
