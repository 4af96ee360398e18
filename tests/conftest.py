"""Pytest configuration and shared fixtures"""
from unittest.mock import AsyncMock, MagicMock

import pytest


SAMPLE_OUTPUT = (
    "acpitz-acpi-0\n"
    "Adapter: ACPI interface\n"
    "temp1:\n"
    "  temp1_input: 27.800\n"
    "  temp1_crit: 119.000\n"
    "\n"
    "nct6775-isa-0290\n"
    "Adapter: ISA adapter\n"
    "in0:\n"
    "  in0_input: 0.880\n"
    "  in0_min: 0.000\n"
    "  in0_max: 1.744\n"
    "  in0_alarm: 0.000\n"
    "fan1:\n"
    "  fan1_input: 1150.000\n"
    "  fan1_min: 0.000\n"
    "temp1:\n"
    "  temp1_input: 35.000\n"
    "  temp1_max: 80.000\n"
    "  temp1_max_hyst: 75.000\n"
    "\n"
)


@pytest.fixture
def sample_output():
    """Raw `sensors -u` output with two devices"""
    return SAMPLE_OUTPUT


@pytest.fixture
def make_process():
    """Factory for a fake asyncio subprocess"""
    def _make(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
        proc = MagicMock()
        proc.communicate = AsyncMock(return_value=(stdout, stderr))
        proc.wait = AsyncMock(return_value=returncode)
        proc.returncode = returncode
        return proc
    return _make
