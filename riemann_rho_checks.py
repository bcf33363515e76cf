#!/usr/bin/env python3
"""
riemann_rho_checks.py

Validating front end for riemann_rho. The core functions take whatever they
are given and let non-finite values (or math domain errors) fall out; the
checked_* wrappers here reject out-of-range arguments up front with a
DomainError instead.
"""

import math

import riemann_rho as rr

VALID_TERMS = (0, 1, 2)


class DomainError(ValueError):
    """Raised when an argument lies outside the region the formulas are valid for."""


def require_ordinate(t, name="t"):
    if not math.isfinite(t) or t <= 0:
        raise DomainError(f"{name} must be a positive finite number, got {t}")
    return t


def require_terms(terms):
    if terms not in VALID_TERMS:
        raise DomainError(f"terms must be one of {VALID_TERMS}, got {terms}")
    return terms


def require_tolerance(tol):
    if not math.isfinite(tol) or tol <= 0:
        raise DomainError(f"tolerance must be a positive finite number, got {tol}")
    return tol


def require_step(step):
    if not math.isfinite(step) or step <= 0:
        raise DomainError(f"derivative step must be a positive finite number, got {step}")
    return step


def require_index(n):
    if not math.isfinite(n) or n < 1:
        raise DomainError(f"zero index must be a finite number >= 1, got {n}")
    return n


def require_bracket(a, b):
    """Both endpoints positive and finite, a < b."""
    require_ordinate(a, "low")
    require_ordinate(b, "high")
    if a >= b:
        raise DomainError(f"low bound {a} must be smaller than high bound {b}")
    return a, b


def checked_theta(t):
    return rr.theta(require_ordinate(t))


def checked_z_func(t, terms=rr.DEFAULT_TERMS, step=rr.DERIVATIVE_STEP):
    require_ordinate(t)
    require_terms(terms)
    require_step(step)
    return rr.z_func(t, terms, step)


def checked_find_zero(a, b, tol=rr.DEFAULT_TOL, terms=rr.DEFAULT_TERMS,
                      step=rr.DERIVATIVE_STEP):
    """find_zero() after validating the bracket, tolerance, terms and step."""
    require_bracket(a, b)
    require_tolerance(tol)
    require_terms(terms)
    require_step(step)
    return rr.find_zero(a, b, tol, terms, step)


def checked_estimate_t(n):
    return rr.estimate_t(require_index(n))
