"""Tests for numeric bound consolidation across OpenAPI 3.0 and 3.1 forms."""

import pytest

from oas_model_generator.model.bounds import NumericBounds, get_numeric_bounds, to_integral
from oas_model_generator.model.errors import EnumDecodeError, NumericDomainError
from oas_model_generator.model.schema import SchemaNode


def _bounds(**schema: object) -> NumericBounds:
    return get_numeric_bounds(SchemaNode(dict(schema), "Test"))


class TestUpperBound:
    """maximum / exclusiveMaximum resolution."""

    def test_inclusive_only(self) -> None:
        """A plain maximum stays inclusive."""
        assert _bounds(maximum=10) == NumericBounds(max=10)

    def test_numeric_exclusive_ties_win(self) -> None:
        """Equal inclusive and exclusive bounds resolve to the exclusive one."""
        b = _bounds(maximum=10, exclusiveMaximum=10)

        assert b.max == 10
        assert b.excl_max is True

    def test_looser_numeric_exclusive_is_ignored(self) -> None:
        """A looser exclusive bound never loosens the inclusive one."""
        b = _bounds(maximum=10, exclusiveMaximum=15)

        assert b.max == 10
        assert b.excl_max is False

    def test_tighter_numeric_exclusive_wins(self) -> None:
        """A tighter exclusive bound replaces the inclusive one."""
        b = _bounds(maximum=10, exclusiveMaximum=5)

        assert b.max == 5
        assert b.excl_max is True

    def test_numeric_exclusive_alone(self) -> None:
        """The 3.1 numeric form works without an inclusive bound."""
        assert _bounds(exclusiveMaximum=5) == NumericBounds(max=5, excl_max=True)

    def test_boolean_flag_marks_inclusive_bound(self) -> None:
        """The 3.0 boolean form marks the existing maximum exclusive."""
        assert _bounds(maximum=10, exclusiveMaximum=True) == NumericBounds(max=10, excl_max=True)

    def test_boolean_flag_without_bound_has_no_effect(self) -> None:
        """There is nothing to exclude without a maximum."""
        assert _bounds(exclusiveMaximum=True) == NumericBounds()

    def test_false_flag_has_no_effect(self) -> None:
        """exclusiveMaximum: false keeps the bound inclusive."""
        assert _bounds(maximum=10, exclusiveMaximum=False) == NumericBounds(max=10)


class TestLowerBound:
    """minimum / exclusiveMinimum resolution."""

    def test_numeric_exclusive_ties_win(self) -> None:
        """Equal bounds resolve to the exclusive one."""
        assert _bounds(minimum=1, exclusiveMinimum=1) == NumericBounds(min=1, excl_min=True)

    def test_looser_numeric_exclusive_is_ignored(self) -> None:
        """A lower exclusive minimum is looser than the inclusive one."""
        assert _bounds(minimum=1, exclusiveMinimum=0) == NumericBounds(min=1)

    def test_tighter_numeric_exclusive_wins(self) -> None:
        """A higher exclusive minimum is tighter."""
        assert _bounds(minimum=1, exclusiveMinimum=3) == NumericBounds(min=3, excl_min=True)

    def test_boolean_flag_marks_inclusive_bound(self) -> None:
        """The 3.0 boolean form marks the existing minimum exclusive."""
        assert _bounds(minimum=0, exclusiveMinimum=True) == NumericBounds(min=0, excl_min=True)

    def test_zero_minimum_is_not_absent(self) -> None:
        """A minimum of zero is a real bound."""
        assert _bounds(minimum=0) == NumericBounds(min=0)


class TestShapes:
    """Malformed bound keywords."""

    def test_string_bound_is_rejected(self) -> None:
        """A bound must be numeric."""
        with pytest.raises(EnumDecodeError, match="maximum must be a number"):
            _bounds(maximum="10")

    def test_string_exclusive_is_rejected(self) -> None:
        """exclusiveMinimum must be a boolean or a number."""
        with pytest.raises(EnumDecodeError, match="exclusiveMinimum"):
            _bounds(exclusiveMinimum="yes")


class TestToIntegral:
    """Integral conversion of integer schema bounds."""

    def test_int_passes_through(self) -> None:
        assert to_integral(10, "Test", "maximum") == 10

    def test_integral_float_converts(self) -> None:
        result = to_integral(10.0, "Test", "maximum")

        assert result == 10
        assert isinstance(result, int)

    def test_fractional_value_is_rejected(self) -> None:
        """Fractions are an error, never truncated."""
        with pytest.raises(NumericDomainError, match="10.5 is not an integer") as exc_info:
            to_integral(10.5, "Counter", "maximum")

        assert exc_info.value.location == "Counter"
