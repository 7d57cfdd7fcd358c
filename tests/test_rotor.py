"""
Tests for a single rotor.

Tests:
- Forward / backward substitution
- Stepping and wraparound
- Notch detection
- Construction errors
"""

import pytest

from catalog import ROTORS
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import Rotor

ROTOR_I_WIRING = ROTORS["I"].wiring


class TestRotorSubstitution:
    """Tests for the signal paths through a rotor."""

    def test_initial_state(self, rotor_i):
        """Constructor keeps the wiring, notch, ring and position."""
        assert rotor_i.wiring == ROTOR_I_WIRING
        assert rotor_i.notch == "Q"
        assert rotor_i.ring_setting == 0
        assert rotor_i.position == 0

    def test_forward_at_zero(self, rotor_i):
        """A enters rotor I at window A and leaves as E."""
        assert rotor_i.forward("A") == "E"

    def test_backward_at_zero(self, rotor_i):
        """E comes back through rotor I as A."""
        assert rotor_i.backward("E") == "A"

    def test_forward_follows_wiring_at_zero(self, rotor_i):
        """With no offset the rotor is its wiring table."""
        assert "".join(rotor_i.forward(ch) for ch in ALPHABET) == ROTOR_I_WIRING

    def test_forward_after_step(self, rotor_i):
        """At window B the contact offset shifts the mapping: A -> J."""
        rotor_i.step()
        # entry B -> K, minus shift 1 -> J
        assert rotor_i.forward("A") == "J"

    def test_ring_setting_offsets_mapping(self):
        """Ring B at window A maps A -> K (wiring read one contact back)."""
        rotor = Rotor(ROTOR_I_WIRING, "Q", ring_setting=1, position=0)
        # shift = -1: entry Z -> J, plus 1 -> K
        assert rotor.forward("A") == "K"

    @pytest.mark.parametrize("position", [0, 5, 16, 25])
    @pytest.mark.parametrize("ring", [0, 7, 25])
    def test_backward_inverts_forward(self, position, ring):
        """backward(forward(x)) == x for every letter."""
        rotor = Rotor(ROTOR_I_WIRING, "Q", ring, position)
        for ch in ALPHABET:
            assert rotor.backward(rotor.forward(ch)) == ch


class TestRotorStepping:
    """Tests for rotation and notch detection."""

    def test_step_advances(self, rotor_i):
        rotor_i.step()
        assert rotor_i.position == 1

    def test_step_wraps(self, rotor_i):
        """Stepping from Z returns to A."""
        rotor_i.position = 25
        rotor_i.step()
        assert rotor_i.position == 0

    def test_at_notch(self):
        """Rotor I is at its notch when the window shows Q."""
        rotor = Rotor(ROTOR_I_WIRING, "Q", 0, 16)
        assert rotor.at_notch()

        rotor.position = 15
        assert not rotor.at_notch()

    def test_notch_ignores_ring_setting(self):
        """Ring setting does not move the notch."""
        rotor = Rotor(ROTOR_I_WIRING, "Q", ring_setting=5, position=16)
        assert rotor.at_notch()

    @pytest.mark.parametrize("value", [26, -1, 99, True, "A"])
    def test_position_assignment_checked(self, rotor_i, value):
        """Out-of-range window positions are refused."""
        with pytest.raises(ConfigurationError):
            rotor_i.position = value
        assert rotor_i.position == 0

    def test_configuration_is_read_only(self, rotor_i):
        with pytest.raises(AttributeError):
            rotor_i.ring_setting = 3


class TestRotorValidation:
    """Tests for construction errors."""

    def test_duplicate_wiring_rejected(self):
        with pytest.raises(ConfigurationError):
            Rotor("A" * 26, "Q")

    def test_short_wiring_rejected(self):
        with pytest.raises(ConfigurationError):
            Rotor(ROTOR_I_WIRING[:-1], "Q")

    def test_bad_notch_rejected(self):
        with pytest.raises(ConfigurationError):
            Rotor(ROTOR_I_WIRING, "QV")

    @pytest.mark.parametrize("value", [-1, 26, True, "A"])
    def test_bad_position_rejected(self, value):
        with pytest.raises(ConfigurationError):
            Rotor(ROTOR_I_WIRING, "Q", 0, value)

    def test_lowercase_wiring_normalised(self):
        rotor = Rotor(ROTOR_I_WIRING.lower(), "q")
        assert rotor.wiring == ROTOR_I_WIRING
        assert rotor.notch == "Q"
