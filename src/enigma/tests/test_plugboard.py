"""Tests for the plugboard."""

import pytest

from enigma.core.constants import CHARSET
from enigma.core.errors import AlphabetError, DuplicateWiring, InvalidPair
from enigma.plugboard import Plugboard


class TestPlugboardConstruction:
    """Test plug validation."""

    def test_empty(self):
        """No plugs means identity."""
        pb = Plugboard()
        assert pb.map(CHARSET) == CHARSET
        assert pb.pairs == ()

    def test_tuple_pairs(self):
        """Pairs may be given as 2-tuples."""
        assert Plugboard(("A", "Q")) == Plugboard("AQ")

    def test_pair_order_irrelevant(self):
        assert Plugboard("AQ") == Plugboard("QA")

    def test_thirteen_pairs(self):
        """All letters can be plugged."""
        pairs = [CHARSET[i : i + 2] for i in range(0, 26, 2)]
        pb = Plugboard(*pairs)
        assert pb.map("A") == "B"
        assert pb.map("Z") == "Y"

    def test_fourteen_pairs(self):
        pairs = [CHARSET[i : i + 2] for i in range(0, 26, 2)]
        with pytest.raises(InvalidPair):
            Plugboard(*pairs, "AB")

    def test_self_pair(self):
        """A letter cannot be plugged to itself."""
        with pytest.raises(InvalidPair):
            Plugboard("AA")

    @pytest.mark.parametrize("bad", ["A", "ABC", "A1", "aq", ("A",)])
    def test_malformed_pair(self, bad):
        with pytest.raises(InvalidPair):
            Plugboard(bad)

    def test_duplicate_letter(self):
        """A letter may appear in only one pair."""
        with pytest.raises(DuplicateWiring):
            Plugboard("AQ", "QB")

    def test_from_string(self):
        assert Plugboard.from_string("AQDS") == Plugboard("AQ", "DS")

    def test_from_string_odd(self):
        with pytest.raises(InvalidPair):
            Plugboard.from_string("AQD")


class TestPlugboardMapping:
    """Test symbol substitution."""

    def test_involution(self):
        """Mapping twice gives the input back."""
        pb = Plugboard("AQ", "DS", "LZ")
        for c in CHARSET:
            assert pb.map(pb.map(c)) == c

    def test_map_text(self):
        pb = Plugboard("AQ", "DS")
        assert pb.map("ADZQ") == "QSZA"

    def test_map_invalid(self):
        with pytest.raises(AlphabetError):
            Plugboard("AQ").map("a")

    def test_map_text_invalid(self):
        with pytest.raises(AlphabetError):
            Plugboard("AQ").map("A1")


class TestPlugboardExport:
    """Test the S field."""

    def test_export(self):
        assert Plugboard("AQ", "DS").export_state() == "S:AQ-DS"

    def test_export_without_separators(self):
        assert Plugboard("AQ", "DS").export_state(omit_separators=True) == "S:AQDS"

    def test_export_empty(self):
        assert Plugboard().export_state() == "S:"

    def test_clone_independent(self):
        pb = Plugboard("AQ")
        copy = pb.clone()
        assert copy == pb
        assert copy is not pb
        assert hash(copy) == hash(pb)
