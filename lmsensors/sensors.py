"""Top-level entry point: run lm_sensors and return a parsed Report"""

import logging
from typing import Optional

from .config import SensorsConfig
from .errors import ParseError
from .parser import Report, parse_output
from .runner import run_sensors_command

logger = logging.getLogger(__name__)


async def get_sensors(config: Optional[SensorsConfig] = None) -> Report:
    """
    Execute `sensors -u` and parse its output.

    Every call spawns its own process and builds a fresh Report owned by
    the caller.

    Raises:
        ExecutionError: the command could not be run or failed
        InvalidOutputError: the command output was too short
        ParseError: parsing the output raised unexpectedly
    """
    config = config or SensorsConfig()
    output = await run_sensors_command(timeout=config.timeout)

    try:
        report = parse_output(output)
    except Exception as e:
        raise ParseError(e) from e

    logger.debug(f"lm_sensors reported {len(report)} devices")
    return report
