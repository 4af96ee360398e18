"""Runs `sensors -u` and hands back its raw stdout.

The command line is fixed. Each call spawns one process and keeps no
state between calls.
"""

import asyncio
import logging
import subprocess
from typing import Optional

from .errors import ExecutionError, InvalidOutputError

logger = logging.getLogger(__name__)

SENSORS_BIN = "/usr/bin/sensors"
SENSORS_ARGS = ("-u",)

# Anything shorter cannot hold a single device block
MIN_OUTPUT_LENGTH = 5


async def run_sensors_command(timeout: Optional[float] = None) -> str:
    """
    Execute `sensors -u` and return its stdout as text.

    Args:
        timeout: seconds to wait for the process, None waits forever

    Raises:
        ExecutionError: spawn failure, non-zero exit or timeout
        InvalidOutputError: stdout shorter than MIN_OUTPUT_LENGTH characters
    """
    cmd = [SENSORS_BIN, *SENSORS_ARGS]
    logger.debug(f"running {' '.join(cmd)}")

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ExecutionError(f"Failed to start {SENSORS_BIN}: {e}", cause=e) from e

    try:
        if timeout is None:
            stdout, stderr = await proc.communicate()
        else:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError as e:
        proc.kill()
        await proc.wait()
        raise ExecutionError(f"{SENSORS_BIN} timed out after {timeout}s", cause=e) from e

    if proc.returncode != 0:
        err = stderr.decode(errors="ignore").strip()
        cause = subprocess.CalledProcessError(proc.returncode, cmd, output=stdout, stderr=stderr)
        raise ExecutionError(
            f"{SENSORS_BIN} exited with code {proc.returncode}: {err}",
            cause=cause,
            returncode=proc.returncode,
            stderr=err,
        ) from cause

    out = stdout.decode(errors="ignore")
    if len(out) < MIN_OUTPUT_LENGTH:
        logger.warning(f"sensors output too short ({len(out)} chars)")
        raise InvalidOutputError(out)

    logger.debug(f"sensors produced {len(out)} chars")
    return out
