"""Tests for the rotor catalog."""

import pytest

from enigma.core.constants import CHARSET
from enigma.core.errors import InvalidPair
from enigma.rotors import (
    EntryRotor,
    Reflector,
    RotatingRotor,
    RotorName,
    custom_entry,
    custom_reflector,
    custom_rotor,
    entry_names,
    get_rotor,
    lookup_rotor_name,
    reflector_names,
    standard_names,
    translate_reflector_wiring,
)


class TestLookup:
    """Test name resolution."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("WW2_I", RotorName.WW2_I),
            ("I", RotorName.WW2_I),
            ("ukw_b", RotorName.WW2_UKW_B),
            (" etw ", RotorName.WW2_ETW),
            ("SWISS_UKW", RotorName.SWISS_UKW),
            ("rocket_iii", RotorName.ROCKET_III),
        ],
    )
    def test_known(self, name, expected):
        assert lookup_rotor_name(name) is expected

    @pytest.mark.parametrize("name", ["", "IX", "WW2_", CHARSET])
    def test_unknown(self, name):
        assert lookup_rotor_name(name) is None

    def test_get_unknown(self):
        with pytest.raises(KeyError):
            get_rotor("NOPE")


class TestCategories:
    """Test catalog enumeration."""

    def test_reflectors(self):
        names = reflector_names()
        assert len(names) == 7
        assert "WW2_UKW_B" in names

    def test_entry_rotors(self):
        assert sorted(entry_names()) == ["ROCKET_ETW", "SWISS_ETW", "WW2_ETW"]

    def test_standard(self):
        names = standard_names()
        assert "WW2_BETA" in names
        assert "COMM_R1" in names
        assert not set(names) & set(reflector_names())

    def test_every_name_builds(self):
        """Every catalog entry produces a rotor of its category."""
        for name in reflector_names():
            assert isinstance(get_rotor(name), Reflector)
        for name in entry_names():
            assert isinstance(get_rotor(name), EntryRotor)
        for name in standard_names():
            assert isinstance(get_rotor(name), RotatingRotor)

    def test_fresh_instances(self):
        a = get_rotor("I")
        a.step()
        assert get_rotor("I").position == 0


class TestNotches:
    """Test historical turnover positions."""

    @pytest.mark.parametrize(
        "name,letters",
        [("I", "Q"), ("II", "E"), ("III", "V"), ("IV", "J"), ("V", "Z"), ("VIII", "ZM")],
    )
    def test_ww2(self, name, letters):
        assert get_rotor(name).notches == tuple(CHARSET.index(c) for c in letters)

    def test_others_have_none(self):
        assert get_rotor("SWISS_I").notches == ()
        assert get_rotor("BETA").notches == ()


class TestFactories:
    """Test custom rotor construction."""

    def test_custom_rotor(self):
        rotor = custom_rotor(CHARSET, position=2, ring=1, notches=(5,))
        assert rotor.is_custom
        assert (rotor.position, rotor.ring, rotor.notches) == (2, 1, (5,))

    def test_custom_entry(self):
        assert custom_entry(CHARSET).is_custom

    def test_custom_reflector(self):
        assert custom_reflector(CHARSET).transform_inbound("A") == "B"


class TestTranslateReflector:
    """Test pairing-by-position to pair-list translation."""

    def test_ukw_b(self):
        assert translate_reflector_wiring("YRUHQSLDPXNGOKMIEBFZCWVJAT") == "AYBRCUDHEQFSGLIPJXKNMOTZVW"

    def test_not_self_paired(self):
        with pytest.raises(InvalidPair):
            translate_reflector_wiring(CHARSET[1:] + CHARSET[0])
