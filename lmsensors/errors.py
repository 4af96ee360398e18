"""Exceptions raised while reading lm_sensors data"""
from typing import Optional


class SensorsError(Exception):
    """Base class for all lmsensors errors"""


class ExecutionError(SensorsError):
    """The sensors command could not be run or exited with failure"""

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.cause = cause
        self.returncode = returncode
        self.stderr = stderr


class InvalidOutputError(SensorsError):
    """The sensors command ran but its output is too short to be a report"""

    def __init__(self, output: str):
        super().__init__(f"Invalid output from lm_sensors: {output!r}")
        self.output = output


class ParseError(SensorsError):
    """Unexpected failure while turning sensors output into a report"""

    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to parse lm_sensors output: {cause}")
        self.cause = cause
