"""
lmsensors - hardware sensor readings from lm_sensors as Python data

Runs `sensors -u` and parses its report into
{device: Device(adapter, sensors={sensor: {reading: value}})}.

Structure:
    lmsensors/
    - errors.py     # ExecutionError, InvalidOutputError, ParseError
    - runner.py     # Runs the sensors command
    - parser.py     # Parses sensors output into a Report
    - sensors.py    # get_sensors() entry point
    - config.py     # YAML configuration
"""

from .config import SensorsConfig
from .errors import (
    SensorsError,
    ExecutionError,
    InvalidOutputError,
    ParseError,
)
from .parser import (
    Device,
    Report,
    parse_report,
    parse_output,
    parse_float,
    report_to_dict,
)
from .runner import run_sensors_command, SENSORS_BIN, SENSORS_ARGS, MIN_OUTPUT_LENGTH
from .sensors import get_sensors

__all__ = [
    # Entry point
    'get_sensors',

    # Building blocks
    'run_sensors_command',
    'parse_report',
    'parse_output',
    'parse_float',
    'report_to_dict',

    # Data model
    'Device',
    'Report',

    # Errors
    'SensorsError',
    'ExecutionError',
    'InvalidOutputError',
    'ParseError',

    # Configuration
    'SensorsConfig',

    # Constants
    'SENSORS_BIN',
    'SENSORS_ARGS',
    'MIN_OUTPUT_LENGTH',
]
