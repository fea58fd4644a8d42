"""Pytest configuration and fixtures for the enigma tests.

This module provides shared machine settings used across the test suite.
"""

import pytest

from enigma.machine import Machine
from enigma.rotors.catalog import get_rotor
from enigma.rotors.stack import RotorStack

# Enigma I, reflector B, rotors I-II-III, rings and positions at A
WW2_STATE = "U:UKW_B;W:I;W:II;W:III;E:ETW"


@pytest.fixture
def ww2_stack():
    """Rotor stack UKW_B, I, II, III, ETW at AAA."""
    return RotorStack(
        get_rotor("UKW_B"),
        get_rotor("I"),
        get_rotor("II"),
        get_rotor("III"),
        get_rotor("ETW"),
    )


@pytest.fixture
def ww2_machine():
    """Machine without plugs built from WW2_STATE."""
    return Machine.from_state(WW2_STATE)


@pytest.fixture
def plugged_state():
    """State string with plugs and non-default ring and position."""
    return "U:UKW_B;W:IV:3:K;W:II;W:V:1:Z;E:ETW;S:AQ-DS-LZ"
