"""Tests for composition of scalar transforms.

Covers evaluation order in both directions, log-Jacobian accumulation and
flattening of nested chains.
"""

import math

import pytest
from hypothesis import given, strategies as st

from calabaria_transforms import (
    CompositeTransform,
    compose,
    Identity,
    Exponential,
    Logistic,
    Shift,
    Scale,
    Negate,
    as_negative_real,
)


class TestEvaluationOrder:
    """Tests for forward and inverse ordering."""

    def test_shift_after_exponential(self):
        """Test Shift(1) @ Exponential evaluates 1 + exp(x)."""
        transform = Shift(1.0) @ Exponential()

        assert transform.transform(0.0) == 2.0

    def test_rightmost_applied_first(self):
        """Test forward map applies the rightmost member first."""
        assert (Shift(1.0) @ Scale(2.0)).transform(3.0) == 7.0
        assert (Scale(2.0) @ Shift(1.0)).transform(3.0) == 8.0

    def test_inverse_mirrors_forward(self):
        """Test inverse applies member inverses left to right."""
        assert (Shift(1.0) @ Scale(2.0)).inverse(7.0) == 3.0
        assert (Scale(2.0) @ Shift(1.0)).inverse(8.0) == 3.0

    def test_negative_half_line(self):
        """Test Negate @ Exponential maps to negative reals."""
        transform = Negate() @ Exponential()

        assert transform.transform(0.0) == -1.0
        assert transform.inverse(-1.0) == 0.0


class TestLogjacAccumulation:
    """Tests for chain-rule accumulation of log-Jacobians."""

    def test_forward_sums_member_logjacs(self):
        """Test forward log-Jacobian is log(scale) + x for Scale @ Exponential."""
        y, logjac = (Scale(3.0) @ Exponential()).transform_and_logjac(0.5)

        assert y == pytest.approx(3.0 * math.exp(0.5))
        assert logjac == pytest.approx(math.log(3.0) + 0.5)

    def test_inner_logjac_evaluated_at_intermediate(self):
        """Test each member's log-Jacobian is taken at its own input."""
        # Exponential sees Scale's output, 2x
        y, logjac = (Exponential() @ Scale(2.0)).transform_and_logjac(1.0)

        assert y == pytest.approx(math.exp(2.0))
        assert logjac == pytest.approx(2.0 + math.log(2.0))

    def test_inverse_sums_member_logjacs(self):
        """Test inverse log-Jacobian mirrors the forward one."""
        transform = Shift(2.0) @ Scale(3.0) @ Logistic()
        y, forward_logjac = transform.transform_and_logjac(0.7)
        x, inverse_logjac = transform.inverse_and_logjac(y)

        assert x == pytest.approx(0.7)
        assert inverse_logjac == pytest.approx(-forward_logjac)

    def test_zero_logjac_chain(self):
        """Test a chain of volume-preserving maps has zero log-Jacobian."""
        y, logjac = (Shift(1.0) @ Negate() @ Identity()).transform_and_logjac(4.0)

        assert y == -3.0
        assert logjac == 0.0

    @given(x=st.floats(min_value=-10, max_value=10))
    def test_additivity(self, x):
        """Property: logjac(t1 @ t2, x) == logjac(t1, t2(x)) + logjac(t2, x)."""
        outer = Scale(0.5) @ Logistic()
        inner = Shift(-1.0) @ Scale(4.0)

        inner_y, inner_logjac = inner.transform_and_logjac(x)
        _, outer_logjac = outer.transform_and_logjac(inner_y)
        _, total = (outer @ inner).transform_and_logjac(x)

        assert total == pytest.approx(outer_logjac + inner_logjac, rel=1e-9, abs=1e-9)


class TestFlattening:
    """Tests for associativity and flat chains."""

    def test_associative(self):
        """Test (a @ b) @ c and a @ (b @ c) give the same flat chain."""
        a, b, c = Shift(1.0), Scale(2.0), Logistic()

        left = (a @ b) @ c
        right = a @ (b @ c)

        assert left.transforms == (a, b, c)
        assert right.transforms == (a, b, c)
        assert left == right

    def test_composite_with_composite(self):
        """Test composing two composites concatenates their chains."""
        first = Shift(1.0) @ Scale(2.0)
        second = Negate() @ Exponential()

        combined = first @ second

        assert combined.transforms == (Shift(1.0), Scale(2.0), Negate(), Exponential())
        assert len(combined) == 4

    def test_compose_folds_left(self):
        """Test compose of many transforms equals repeated @."""
        a, b, c, d = Shift(1.0), Scale(2.0), Negate(), Exponential()

        assert compose(a, b, c, d) == ((a @ b) @ c) @ d

    def test_constructor_flattens(self):
        """Test nested composites passed to the constructor are spliced in."""
        nested = CompositeTransform((Shift(1.0), Negate() @ Exponential()))

        assert nested.transforms == (Shift(1.0), Negate(), Exponential())
        assert all(not isinstance(t, CompositeTransform) for t in nested.transforms)

    @given(x=st.floats(min_value=-5, max_value=5))
    def test_grouping_does_not_change_values(self, x):
        """Property: grouping of a chain does not affect evaluation."""
        a, b, c = Shift(-2.0), Scale(1.5), Exponential()

        left = (a @ b) @ c
        right = a @ (b @ c)

        assert left.transform_and_logjac(x) == right.transform_and_logjac(x)


class TestSingleElement:
    """Tests for one-element composites."""

    @given(x=st.floats(min_value=-10, max_value=10))
    def test_behaves_like_member(self, x):
        """Property: a one-element composite behaves like its member."""
        single = compose(Logistic())

        assert single.transform(x) == Logistic().transform(x)
        assert single.transform_and_logjac(x) == pytest.approx(Logistic().transform_and_logjac(x))

    def test_single_member_chain(self):
        """Test compose of one transform keeps one member."""
        assert compose(Exponential()).transforms == (Exponential(),)


class TestValidation:
    """Tests for invalid compositions."""

    def test_empty_chain_rejected(self):
        """Test an empty chain cannot be built."""
        with pytest.raises(ValueError, match="at least one transform"):
            CompositeTransform(())

        with pytest.raises(ValueError, match="at least one transform"):
            compose()

    def test_non_transform_member_rejected(self):
        """Test chain members must be scalar transforms."""
        with pytest.raises(TypeError, match="must be ScalarTransform"):
            CompositeTransform((Shift(1.0), 3.0))

    def test_matmul_with_number_unsupported(self):
        """Test composing with a plain number raises TypeError."""
        with pytest.raises(TypeError):
            Shift(1.0) @ 3.0


class TestRepresentation:
    """Tests for composite equality and repr."""

    def test_equal_to_canonical_constant(self):
        """Test structurally equal chains compare equal."""
        assert Negate() @ Exponential() == as_negative_real

    def test_repr_lists_members(self):
        """Test repr shows members joined by @."""
        assert repr(Shift(1.0) @ Exponential()) == "Shift(shift=1.0) @ Exponential()"
