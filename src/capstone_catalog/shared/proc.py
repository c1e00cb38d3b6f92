from __future__ import annotations

import os
import signal
import subprocess
from typing import Optional, Sequence


def popen(cmd: Sequence[str], *, env: dict[str, str] | None = None) -> subprocess.Popen:
    """
    Start a process in its own process group so the whole tree (reloaders, watchers)
    can be stopped together.
    """
    return subprocess.Popen(
        list(cmd),
        env=env,
        start_new_session=True,
    )


def terminate_tree(proc: Optional[subprocess.Popen], timeout_s: float = 5.0) -> None:
    if proc is None or proc.poll() is not None:
        return

    if os.name == "posix":
        try:
            os.killpg(proc.pid, signal.SIGTERM)
        except ProcessLookupError:
            return
    else:
        proc.terminate()

    try:
        proc.wait(timeout=timeout_s)
    except subprocess.TimeoutExpired:
        if os.name == "posix":
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except ProcessLookupError:
                return
        else:
            proc.kill()
