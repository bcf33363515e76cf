"""
Tests for the validating wrappers in riemann_rho_checks.
"""

import math

import pytest

import riemann_rho as rr
from riemann_rho_checks import (
    DomainError,
    checked_estimate_t,
    checked_find_zero,
    checked_theta,
    checked_z_func,
    require_bracket,
    require_index,
    require_ordinate,
    require_step,
    require_terms,
    require_tolerance,
)


class TestRequirements:
    """Individual precondition checks."""

    @pytest.mark.parametrize("t", [0.0, -1.0, math.nan, math.inf])
    def test_bad_ordinate(self, t):
        with pytest.raises(DomainError):
            require_ordinate(t)

    @pytest.mark.parametrize("terms", [-1, 3, 1.5])
    def test_bad_terms(self, terms):
        with pytest.raises(DomainError):
            require_terms(terms)

    @pytest.mark.parametrize("tol", [0.0, -1e-8, math.nan])
    def test_bad_tolerance(self, tol):
        with pytest.raises(DomainError):
            require_tolerance(tol)

    def test_bad_step(self):
        with pytest.raises(DomainError):
            require_step(0.0)

    @pytest.mark.parametrize("n", [0, 0.99, -5, math.inf])
    def test_bad_index(self, n):
        with pytest.raises(DomainError):
            require_index(n)

    def test_reversed_bracket(self):
        """low must be smaller than high."""
        with pytest.raises(DomainError, match="smaller"):
            require_bracket(15.0, 14.0)

    def test_domain_error_is_value_error(self):
        """Callers catching ValueError also catch DomainError."""
        assert issubclass(DomainError, ValueError)

    def test_valid_values_pass_through(self):
        assert require_ordinate(14.0) == 14.0
        assert require_terms(2) == 2
        assert require_bracket(14.0, 15.0) == (14.0, 15.0)
        assert require_index(1) == 1


class TestCheckedEntryPoints:
    """Wrappers agree with the core on valid input and refuse the rest."""

    def test_theta(self):
        assert checked_theta(100.0) == rr.theta(100.0)
        with pytest.raises(DomainError):
            checked_theta(0.0)

    def test_z_func(self):
        assert checked_z_func(50.0, 1) == rr.z_func(50.0, 1)
        with pytest.raises(DomainError):
            checked_z_func(50.0, 5)

    def test_find_zero(self):
        assert checked_find_zero(14.0, 15.0, 1e-8, 0) == rr.find_zero(14.0, 15.0, 1e-8, 0)
        assert checked_find_zero(0.1, 1.0, 1e-8, 0) is None
        with pytest.raises(DomainError):
            checked_find_zero(-1.0, 15.0, 1e-8, 0)
        with pytest.raises(DomainError):
            checked_find_zero(14.0, 15.0, 0.0, 0)

    def test_estimate_t(self):
        assert checked_estimate_t(10) == rr.estimate_t(10)
        with pytest.raises(DomainError):
            checked_estimate_t(0)
