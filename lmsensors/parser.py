"""Parser for `sensors -u` output.

The raw report is a sequence of device blocks separated by blank lines:

    coretemp-isa-0000
    Adapter: ISA adapter
    Package id 0:
    temp1:
      temp1_input: 45.000
      temp1_max: 80.000

The first line of a block names the device, an `Adapter:` line names the
bus it hangs off, an unindented `name:` line opens a sensor, and each
indented `name_key: value` line adds one reading to the open sensor.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

logger = logging.getLogger(__name__)

ADAPTER_RE = re.compile(r"Adapter: ([^\r\n]*)")
SENSOR_RE = re.compile(r"(\w+):", re.ASCII)
VALUE_RE = re.compile(r"\s+(\w+): (.*)", re.ASCII)

# Leading float literal; trailing text such as units is ignored
FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))", re.ASCII)

SEPARATORS = ("", "\r", "\n")

Sensor = Dict[str, float]


@dataclass
class Device:
    """One sensor chip: the adapter it sits on and its sensors"""
    adapter: Optional[str] = None
    sensors: Dict[str, Sensor] = field(default_factory=dict)


Report = Dict[str, Device]


def parse_float(text: str) -> float:
    """Parse the leading number of `text`, ignoring trailing units; NaN if none"""
    match = FLOAT_PREFIX_RE.match(text)
    if not match:
        return float("nan")
    return float(match.group(1))


def reading_key(token: str) -> str:
    """
    Reading key from a value token, e.g. "temp1_input" -> "input".

    Everything after the first underscore is kept ("temp1_crit_alarm" ->
    "crit_alarm"). A token without an underscore maps to "".
    """
    return token.partition("_")[2]


def parse_report(lines: Sequence[str]) -> Report:
    """
    Build a Report from the lines of `sensors -u` output.

    Lines that match none of the known shapes are skipped. Runs of blank
    lines count as one separator, and a separator at the very end of
    input opens no device. If the first line is blank, lines up to the
    next separator are dropped.
    """
    result: Report = {}
    device: Optional[Device] = None
    sensor: Optional[Sensor] = None

    def open_device(name: Optional[str]) -> Optional[Device]:
        if not name or name in SEPARATORS:
            return None
        if name not in result:
            result[name] = Device()
        return result[name]

    if not lines:
        return result

    device = open_device(lines[0])
    idx = 1
    while idx < len(lines):
        line = lines[idx]
        idx += 1

        if line in SEPARATORS:
            # The line after a separator is the next device header,
            # unless it is another separator
            next_name = lines[idx] if idx < len(lines) else None
            device = open_device(next_name)
            sensor = None
            if next_name not in SEPARATORS:
                idx += 1
            continue

        if device is None:
            continue

        match = ADAPTER_RE.match(line)
        if match:
            if device.adapter is None:
                device.adapter = match.group(1)
            continue

        match = SENSOR_RE.fullmatch(line)
        if match:
            sensor = {}
            device.sensors[match.group(1)] = sensor

        if sensor is not None:
            match = VALUE_RE.match(line)
            if match:
                sensor[reading_key(match.group(1))] = parse_float(match.group(2))

    logger.debug(f"parsed {len(result)} devices from {len(lines)} lines")
    return result


def parse_output(text: str) -> Report:
    """Split raw command output on newlines and parse it"""
    return parse_report(text.split("\n"))


def report_to_dict(report: Report) -> Dict[str, dict]:
    """Plain nested dicts, e.g. for json.dumps"""
    return {
        name: {
            "adapter": device.adapter,
            "sensors": {sensor: dict(readings) for sensor, readings in device.sensors.items()},
        }
        for name, device in report.items()
    }
