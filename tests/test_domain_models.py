"""Tests for domain models and feature code parsing."""

import math

import pytest

from kerfcad.domain import (
    BREAK,
    Direction,
    EdgeModifier,
    Kerf,
    Point,
    WavePhase,
    parse_direction,
    parse_flex_code,
    parse_heading,
    parse_line_code,
    parse_slit_code,
    parse_tooth_code,
    parse_wave_code,
)
from kerfcad.exceptions import InvalidArgumentError, InvalidCodeError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0
        assert not p.is_break

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0  # type: ignore[misc]

    def test_translated(self) -> None:
        """Test translation of a regular point."""
        assert Point(1.0, 2.0).translated(3.0, -1.0) == Point(4.0, 1.0)

    def test_break_survives_translation(self) -> None:
        """Test that a break is returned unchanged by translation."""
        moved = BREAK.translated(10.0, 10.0)
        assert moved.is_break
        assert math.isnan(moved.x)

    def test_half_nan_is_not_break(self) -> None:
        """Test that only a point with both coordinates NaN is a break."""
        assert not Point(math.nan, 0.0).is_break


class TestKerf:
    """Tests for Kerf class."""

    def test_from_scalar(self) -> None:
        """Test that a scalar applies to both axes."""
        assert Kerf.of(0.1) == Kerf(0.1, 0.1)

    def test_from_pair(self) -> None:
        """Test (horizontal, vertical) pairs."""
        assert Kerf.of((0.1, -0.2)) == Kerf(0.1, -0.2)
        assert Kerf.of([0.3]) == Kerf(0.3, 0.3)

    def test_from_kerf(self) -> None:
        """Test that an existing Kerf is passed through."""
        kerf = Kerf(0.1, 0.2)
        assert Kerf.of(kerf) is kerf

    def test_bad_length(self) -> None:
        """Test that sequences of other lengths are rejected."""
        with pytest.raises(InvalidArgumentError, match="kerf"):
            Kerf.of((0.1, 0.2, 0.3))

    def test_zero(self) -> None:
        """Test zero kerf."""
        assert Kerf.zero() == Kerf()
        assert Kerf.zero() != Kerf(0.0, 0.1)

    def test_magnitude(self) -> None:
        """Test that magnitude drops the signs."""
        assert Kerf(-0.1, 0.2).magnitude() == Kerf(0.1, 0.2)


class TestDirection:
    """Tests for direction letters and rotations."""

    @pytest.mark.parametrize(
        ("letter", "rotation"),
        [
            ("E", (1.0, 0.0)),
            ("N", (0.0, 1.0)),
            ("W", (-1.0, 0.0)),
            ("S", (0.0, -1.0)),
        ],
    )
    def test_quarter_turns(self, letter, rotation) -> None:
        """Test that each compass letter maps to an exact rotation."""
        direction, mirrored = parse_direction(letter)
        assert direction.rotation == rotation
        assert mirrored is False

    def test_lowercase_mirrors(self) -> None:
        """Test that lowercase letters set the mirror flag."""
        assert parse_direction("s") == (Direction.SOUTH, True)

    def test_unknown_letter(self) -> None:
        """Test that other letters raise InvalidCodeError."""
        with pytest.raises(InvalidCodeError, match="unknown direction"):
            parse_direction("X")

    def test_code_error_is_value_error(self) -> None:
        """Test that code errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_direction("Q")


class TestToothCode:
    """Tests for finger-joint code parsing."""

    def test_full_code(self) -> None:
        """Test a full code with four level bits."""
        code = parse_tooth_code("N|1011]")
        assert code.direction == Direction.NORTH
        assert code.mirrored is False
        assert code.levels == (True, False, True, True)
        assert code.left == EdgeModifier(grow=False, line=True, push=False)
        assert code.right == EdgeModifier(grow=True, line=True, push=False)
        assert code.kerf_signs == (1.0, 1.0)

    def test_short_code(self) -> None:
        """Test that a single bit is broadcast to all four levels."""
        assert parse_tooth_code("E[1]").levels == (True, True, True, True)
        assert parse_tooth_code("E[1]") == parse_tooth_code("E[1111]")

    def test_short_code_with_signs(self) -> None:
        """Test the short form with a kerf sign suffix."""
        code = parse_tooth_code("w:0:-+")
        assert code.mirrored is True
        assert code.levels == (False, False, False, False)
        assert code.kerf_signs == (-1.0, 1.0)

    @pytest.mark.parametrize(
        ("char", "grow", "line", "push"),
        [
            ("|", False, True, False),
            (":", False, False, False),
            ("[", True, True, False),
            ("{", True, False, False),
            ("]", True, True, True),
            ("}", True, False, True),
        ],
    )
    def test_left_modifiers(self, char, grow, line, push) -> None:
        """Test left edge modifiers; ] and } push the row forward."""
        left = parse_tooth_code(f"E{char}0101|").left
        assert (left.grow, left.line, left.push) == (grow, line, push)

    @pytest.mark.parametrize(("char", "push"), [("[", True), ("{", True), ("]", False), ("}", False)])
    def test_right_push(self, char, push) -> None:
        """Test that [ and { push on the right edge."""
        assert parse_tooth_code(f"E|0101{char}").right.push is push

    @pytest.mark.parametrize("code", ["E|10|", "E|10101|", "X|1011|", "E?1011|", "E|1021|", "E|1011|+x", ""])
    def test_invalid_codes(self, code) -> None:
        """Test that malformed codes raise InvalidCodeError."""
        with pytest.raises(InvalidCodeError):
            parse_tooth_code(code)


class TestOtherCodes:
    """Tests for slit, wave, line, flex and heading parsing."""

    def test_slit_code(self) -> None:
        """Test slit code parsing."""
        code = parse_slit_code("n0")
        assert code.direction == Direction.NORTH
        assert code.mirrored is True
        assert code.level is False

    def test_slit_code_length(self) -> None:
        """Test slit codes of the wrong length."""
        with pytest.raises(InvalidCodeError):
            parse_slit_code("E10")

    @pytest.mark.parametrize(
        ("char", "phase"),
        [("0", WavePhase.TROUGH), ("1", WavePhase.CREST), ("/", WavePhase.RISING), ("\\", WavePhase.FALLING)],
    )
    def test_wave_phases(self, char, phase) -> None:
        """Test every wave phase character."""
        assert parse_wave_code("E" + char).phase == phase

    def test_wave_bad_phase(self) -> None:
        """Test an unknown wave phase."""
        with pytest.raises(InvalidCodeError, match="phase"):
            parse_wave_code("E2")

    def test_line_code(self) -> None:
        """Test line codes with and without sign suffix."""
        assert parse_line_code("N").kerf_signs is None
        code = parse_line_code("s+-")
        assert code.direction == Direction.SOUTH
        assert code.mirrored is True
        assert code.kerf_signs == (1.0, -1.0)

    @pytest.mark.parametrize("code", ["", "NE", "N+*", "N+-+"])
    def test_line_code_invalid(self, code) -> None:
        """Test malformed line codes."""
        with pytest.raises(InvalidCodeError):
            parse_line_code(code)

    def test_flex_code(self) -> None:
        """Test flex codes with an optional start bit."""
        assert parse_flex_code("E").start is False
        assert parse_flex_code("w1").start is True
        with pytest.raises(InvalidCodeError):
            parse_flex_code("E01")

    def test_headings(self) -> None:
        """Test arc headings."""
        assert parse_heading("N") == (0.0, 1.0)
        assert parse_heading("SW") == (-1.0, -1.0)
        with pytest.raises(InvalidCodeError):
            parse_heading("NN")
