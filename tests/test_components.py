import pytest

from alphabet import Direction
from errors import ConfigurationError, InvalidCharacterError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector
from wheels import REFLECTORS, ROTORS, make_reflector, make_rotor, make_stator


# ── Rotor ─────────────────────────────────────────────────────────
def test_rotor_offset_wiring_offset():
    rotor = make_rotor("I")
    assert rotor.encode(Direction.FORWARD, 0) == 4          # A -> E at window A
    rotor.set_position("B")
    assert rotor.encode(Direction.FORWARD, 0) == 9          # A -> J at window B


def test_rotor_inverse_undoes_forward_at_every_position():
    rotor = make_rotor("IV")
    for _ in range(26):
        for sig in range(26):
            assert rotor.encode(Direction.INVERSE, rotor.encode(Direction.FORWARD, sig)) == sig
        rotor.advance()


def test_rotor_advance_wraps_and_reports_turnover():
    rotor = make_rotor("III", "U")
    assert not rotor.at_turnover()
    rotor.advance()
    assert rotor.window == "V"
    assert rotor.at_turnover()

    rotor.set_position("Z")
    rotor.advance()
    assert rotor.window == "A"


def test_rotor_rejects_bad_position():
    with pytest.raises(ConfigurationError):
        make_rotor("I", "1")


# ── Reflector ─────────────────────────────────────────────────────
@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_reflector_is_fixed_point_free_involution(name):
    refl = make_reflector(name)
    for sig in range(26):
        assert refl.reflect(refl.reflect(sig)) == sig
        assert refl.reflect(sig) != sig


def test_reflector_rejects_rotor_wiring():
    with pytest.raises(ConfigurationError, match="involution"):
        Reflector(ROTORS["I"][0])


def test_reflector_rejects_self_mapped_letters():
    with pytest.raises(ConfigurationError, match="to itself"):
        Reflector("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


# ── Stator ────────────────────────────────────────────────────────
def test_army_stator_is_identity():
    stator = make_stator("army")
    for sig in range(26):
        assert stator.pass_to(Direction.FORWARD, sig) == sig
        assert stator.pass_to(Direction.INVERSE, sig) == sig


def test_commercial_stator_relabels_both_ways():
    stator = make_stator("Commercial")
    assert stator.pass_to(Direction.FORWARD, 0) == 16      # A -> Q
    assert stator.pass_to(Direction.INVERSE, 16) == 0


# ── Plugboard ─────────────────────────────────────────────────────
def test_plugboard_pairs_are_symmetric():
    pb = Plugboard("AB cd")
    assert pb.swap(0) == 1 and pb.swap(1) == 0
    assert pb.swap(2) == 3 and pb.swap(3) == 2
    assert pb.swap(4) == 4
    assert pb.pairs == ["AB", "CD"]


def test_plugboard_accepts_tuples():
    pb = Plugboard([("Q", "Z")])
    assert pb.swap(16) == 25


@pytest.mark.parametrize(
    "pairs",
    ["AB BC", "AA", "A1", "ABC", " ".join(["AB"] * 14)],
)
def test_plugboard_rejects_bad_pairs(pairs):
    with pytest.raises(ConfigurationError):
        Plugboard(pairs)


def test_empty_plugboard_passes_everything():
    pb = Plugboard()
    assert [pb.swap(i) for i in range(26)] == list(range(26))


# ── Keyboard ──────────────────────────────────────────────────────
def test_keyboard_only_takes_uppercase_letters():
    kb = Keyboard()
    assert kb.forward("C") == 2
    for bad in ["c", "1", "", "AB"]:
        with pytest.raises(InvalidCharacterError):
            kb.forward(bad)


def test_keyboard_lamp_requires_reduced_signal():
    kb = Keyboard()
    assert kb.backward(25) == "Z"
    with pytest.raises(AssertionError):
        kb.backward(26)


# ── catalogs ──────────────────────────────────────────────────────
def test_catalog_names_are_case_insensitive():
    assert make_rotor("iii").name == "III"
    assert make_reflector("b").name == "B"


@pytest.mark.parametrize(
    "factory, name",
    [(make_rotor, "VI"), (make_reflector, "D"), (make_stator, "navy")],
)
def test_unknown_wheel_names(factory, name):
    with pytest.raises(ConfigurationError, match="Unknown"):
        factory(name)


def test_factories_return_independent_rotors():
    a, b = make_rotor("I"), make_rotor("I")
    a.advance()
    assert b.window == "A"
