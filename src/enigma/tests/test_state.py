"""Tests for state string parsing and formatting."""

import pytest

from enigma.core.errors import (
    DuplicateWiring,
    IncompleteState,
    InvalidCombination,
    ParseError,
    RangeError,
    StateError,
)
from enigma.core.constants import CHARSET
from enigma.machine import Machine
from enigma.plugboard import Plugboard
from enigma.state import format_state, parse_entry, parse_reflector, parse_rotor, parse_state

WIRING_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


class TestParseRotor:
    """Test the W field value."""

    def test_name_only(self):
        rotor = parse_rotor("I")
        assert rotor.name == "WW2_I"
        assert (rotor.ring, rotor.position) == (0, 0)

    def test_ring_and_position(self):
        """Ring and position accept 1-based numbers and letters."""
        rotor = parse_rotor("III:2:C")
        assert (rotor.ring, rotor.position) == (1, 2)
        rotor = parse_rotor("III:b:3")
        assert (rotor.ring, rotor.position) == (1, 2)

    def test_empty_ring(self):
        assert parse_rotor("II::D").position == 3

    def test_custom(self):
        rotor = parse_rotor(WIRING_I + ":1:A:QE")
        assert rotor.is_custom
        assert rotor.notches == (16, 4)

    def test_catalog_with_notches(self):
        with pytest.raises(InvalidCombination):
            parse_rotor("I:1:A:Q")

    def test_too_many_parts(self):
        with pytest.raises(ParseError):
            parse_rotor(WIRING_I + ":1:A:Q:X")

    def test_not_rotating(self):
        with pytest.raises(ParseError):
            parse_rotor("UKW_B")

    def test_unknown(self):
        with pytest.raises(ParseError):
            parse_rotor("ABC")

    def test_bad_notch(self):
        with pytest.raises(ParseError):
            parse_rotor(WIRING_I + ":1:A:Q1")

    def test_notch_uppercasing_to_two_letters(self):
        with pytest.raises(ParseError):
            parse_rotor(WIRING_I + ":1:A:\ufb06")

    def test_duplicate_notch_letters(self):
        assert parse_rotor(WIRING_I + ":1:A:QQE").notches == (16, 4)

    def test_bad_ring(self):
        with pytest.raises(RangeError):
            parse_rotor("I:27")


class TestParseComponents:
    """Test the U and E field values."""

    def test_reflector_name(self):
        assert parse_reflector("UKW_C").name == "WW2_UKW_C"

    def test_reflector_pairs(self):
        """Dashed 24 letter pairs get their implied last pair."""
        ukw = parse_reflector("AB-CD-EF-GH-IJ-KL-MN-OP-QR-ST-UV-WX")
        assert ukw.transform_inbound("Z") == "Y"

    def test_reflector_wrong_kind(self):
        with pytest.raises(ParseError):
            parse_reflector("I")

    def test_entry_name(self):
        assert parse_entry("ETW").name == "WW2_ETW"

    def test_entry_wiring(self):
        assert parse_entry("qwertzuioasdfghjkpyxcvbnml").transform_inbound("A") == "Q"

    def test_entry_wrong_kind(self):
        with pytest.raises(ParseError):
            parse_entry("UKW_B")


class TestParseState:
    """Test whole state strings."""

    def test_minimal(self):
        state = parse_state("U:UKW_B;W:I;E:ETW")
        assert len(state.rotors) == 1
        assert state.plugboard == Plugboard()

    def test_case_and_whitespace(self):
        state = parse_state(" u:ukw_b; w:i ;e:etw;s:aq-ds ")
        assert state.plugboard == Plugboard("AQ", "DS")

    def test_rotor_order(self):
        state = parse_state("U:UKW_B;W:I;W:II;W:III;E:ETW")
        assert [r.name for r in state.build_stack().rotating] == ["WW2_I", "WW2_II", "WW2_III"]

    @pytest.mark.parametrize("missing", ["W:I;E:ETW", "U:UKW_B;W:I", "U:UKW_B;E:ETW"])
    def test_incomplete(self, missing):
        with pytest.raises(IncompleteState):
            parse_state(missing)

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "   ",
            "U:UKW_B;W:I;E:ETW;X:1",
            "U:UKW_B;W:I;E:ETW;nocolon",
            "U:UKW_B;U:UKW_C;W:I;E:ETW",
            "U:UKW_B;W:I;E:ETW;E:ETW",
            "U:UKW_B;W:I;E:ETW;S:AB;S:CD",
            "U:UKW_B;W:I;E:ETW;",
        ],
    )
    def test_malformed(self, bad):
        with pytest.raises(ParseError):
            parse_state(bad)

    def test_combination_not_wrapped(self):
        """Notch errors keep their own type."""
        with pytest.raises(InvalidCombination):
            parse_state("U:UKW_B;W:I:1:A:Q;E:ETW")

    def test_component_error_chained(self):
        """Component errors become ParseErrors naming the field."""
        with pytest.raises(ParseError) as excinfo:
            parse_state("U:UKW_B;W:I;E:ETW;S:AQ-AB")
        assert excinfo.value.field == "S:AQ-AB"
        assert isinstance(excinfo.value.__cause__, DuplicateWiring)

    def test_range_error_chained(self):
        with pytest.raises(ParseError) as excinfo:
            parse_state("U:UKW_B;W:I:27;E:ETW")
        assert isinstance(excinfo.value.__cause__, RangeError)

    def test_state_errors_share_base(self):
        for exc in (ParseError, IncompleteState, InvalidCombination):
            assert issubclass(exc, StateError)


class TestFormatState:
    """Test serialization."""

    def test_format(self):
        state = parse_state("U:UKW_B;W:I;W:II:1:D;W:III:2;E:ETW;S:AQ-DS")
        text = format_state(state.build_stack(), state.plugboard)
        assert text == "U:WW2_UKW_B;W:WW2_I;W:WW2_II:1:D;W:WW2_III:2;E:WW2_ETW;S:AQDS"

    def test_custom_round_trip(self):
        """Custom components survive formatting and parsing."""
        text = "U:AB-CD-EF-GH-IJ-KL-MN-OP-QR-ST-UV-WX;W:" + WIRING_I + ":3:F:QE;E:" + CHARSET + ";S:"
        state = parse_state(text)
        assert format_state(state.build_stack(), state.plugboard) == text

    def test_custom_machine_round_trip(self):
        """An imported copy of a custom machine encrypts identically."""
        text = (
            "U:AC-BD-EG-FH-IK-JL-MO-NP-QS-RT-UW-VX;"
            "W:" + WIRING_I + ":4:Y:QE;"
            "W:AJDKSIRUXBLHWTMCQGZNPYFVOE:1:C:Z;"
            "W:BDFHJLCPRTXVZNYEIWGAKMUSQO:26:V:VM;"
            "E:QWERTZUIOASDFGHJKPYXCVBNML;S:AQ-DS-LZ"
        )
        original = Machine.from_state(text)
        plain = "FUNKSPRUCHVONUBOOTANBEFEHLSHABERXXX" * 3
        original.encrypt("VORLAUF")
        imported = Machine.from_state(original.export_state())
        assert imported.export_state() == original.export_state()
        assert imported.encrypt(plain) == original.encrypt(plain)
        assert imported.export_state() == original.export_state()
