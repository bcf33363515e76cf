#!/usr/bin/env python3
"""
riemann_rho.py

Approximates nontrivial zeros of the Riemann zeta function on the critical
line s = 1/2 + i*t, using plain 64-bit floats:

  - theta(t): Riemann–Siegel theta function, 4-term asymptotic series.
  - z_func(t, terms): Hardy's Z(t) via the Riemann–Siegel formula, with up to
    two correction orders computed by numerical differentiation.
  - find_zero(a, b, tol, terms): bisection on a sign change of Z(t).
  - estimate_t(n): ordinate of the n-th zero from the zero-counting function,
    via Newton's method.

It is NOT a proof, just a numeric approximation. The expansion is only
meaningful for t > 0 (and gets better as t grows); nothing here validates
its inputs. See riemann_rho_checks.py for a validating front end.
"""

import functools
import logging
import math

import numpy as np

# =======================
# 1) CONFIGURE PARAMETERS
# =======================

DEFAULT_TOL = 1e-10
DEFAULT_TERMS = 0
HIGH_ORDER_TERMS = 2

# Step used for finite differences of the correction kernel
DERIVATIVE_STEP = 1e-5

# Newton iterations for the zero-index estimator (no convergence check)
NEWTON_ITERATIONS = 20

# Smallest Newton seed, a = t/(2*pi) = e, so log(a) starts at 1
NEWTON_SEED_FLOOR = 2 * math.pi * math.e

# Halving a float64 interval more than this many times cannot shrink it further
MAX_BISECTIONS = 2100
BISECTION_SLACK = 4

# Half-width of the bracket placed around an estimated zero
SEARCH_HALF_WIDTH = 1.0

logger = logging.getLogger("RiemannRho")

# ===============================
# 2) Riemann–Siegel theta
# ===============================

def theta(t):
    """
    Riemann-Siegel theta function, asymptotic form:
        theta(t) ~ (t/2)*log(t/(2*pi)) - t/2 - pi/8
                   + 1/(48t) + 7/(5760t^3) - 31/(80640t^5)
    for t > 0. Outside that range the result is NaN or infinite.
    """
    with np.errstate(all="ignore"):
        t = np.float64(t)
        log_term = (t / 2.0) * np.log(t / (2.0 * np.pi))
        return float(log_term - t / 2.0 - np.pi / 8.0
                     + 1.0 / (48.0 * t)
                     + 7.0 / (5760.0 * t ** 3)
                     - 31.0 / (80640.0 * t ** 5))

# ===============================
# 3) Finite differences
# ===============================

def derivative(f, x, n, h):
    """
    n-th derivative of f at x by nested central differences:

        D^0 f(x) = f(x)
        D^n f(x) = (D^(n-1) f(x+h) - D^(n-1) f(x-h)) / (2h)

    Stencil values are memoized on (point, order), so each sample point
    is evaluated once instead of 2^n times.
    """
    @functools.lru_cache(maxsize=None)
    def stencil(point, order):
        if order == 0:
            return f(point)
        return (stencil(point + h, order - 1) - stencil(point - h, order - 1)) / (2.0 * h)

    return stencil(x, n)

# ===============================
# 4) Hardy's Z(t)
# ===============================

def psi(p):
    """Riemann-Siegel correction kernel cos(2*pi*(p^2 - p - 1/16)) / cos(2*pi*p)."""
    with np.errstate(all="ignore"):
        p = np.float64(p)
        return np.cos(2.0 * np.pi * (p * p - p - 1.0 / 16.0)) / np.cos(2.0 * np.pi * p)


def z_func(t, terms=DEFAULT_TERMS, step=DERIVATIVE_STEP):
    """
    Riemann–Siegel approximation of Hardy's Z-function for real t > 0:

      Z(t) = 2 * sum_{k=1..nu} cos(theta(t) - t*log(k)) / sqrt(k) + R(t),

    where a = t/(2*pi), nu = floor(sqrt(a)), p = sqrt(a) - nu and

      R(t) = (-1)^(nu-1) * a^(-1/4) * (C0 + C1*a^(-1/2) + C2*a^(-1))

      C0 = psi(p)
      C1 = -psi'''(p) / (96*pi^2)
      C2 = psi^(6)(p) / (18432*pi^4) + psi''(p) / (64*pi^2)

    'terms' picks how many of C1, C2 are added (0, 1 or 2). The kernel
    derivatives come from derivative() with the given step.

    NOTE: psi has a denominator cos(2*pi*p); close to its zeros the
    correction can blow up. That is left as is.

    Arithmetic follows IEEE rules: t <= 0 or NaN gives a non-finite
    result instead of an exception.
    """
    with np.errstate(all="ignore"):
        t = np.float64(t)
        a = t / (2.0 * np.pi)
        sqrt_a = np.sqrt(a)
        # NaN / inf: empty main sum
        nu = int(np.floor(sqrt_a)) if np.isfinite(sqrt_a) else 0
        p = sqrt_a - nu

        # Main sum
        th = theta(t)
        main_sum = np.float64(0.0)
        for k in range(1, nu + 1):
            main_sum += np.cos(th - t * np.log(k)) / np.sqrt(k)
        main_sum *= 2.0

        # Remainder
        sign = -1.0 if nu % 2 == 0 else 1.0
        scale = a ** -0.25

        remainder = sign * scale * psi(p)

        if terms >= 1:
            psi3 = derivative(psi, p, 3, step)
            c1 = -1.0 / (96.0 * np.pi ** 2) * psi3
            remainder += sign * scale * c1 * a ** -0.5

        if terms >= 2:
            psi2 = derivative(psi, p, 2, step)
            psi6 = derivative(psi, p, 6, step)
            c2 = 1.0 / (18432.0 * np.pi ** 4) * psi6 + 1.0 / (64.0 * np.pi ** 2) * psi2
            remainder += sign * scale * c2 * a ** -1.0

        return float(main_sum + remainder)


def zeta_on_critical_line(t, terms=DEFAULT_TERMS, step=DERIVATIVE_STEP):
    """
    Approximate zeta(1/2 + i*t) from Z(t):
      Z(t) = e^{i theta(t)} * zeta(1/2 + i t)
    => zeta(1/2 + i t) = Z(t) * e^{-i theta(t)}
    """
    with np.errstate(all="ignore"):
        return complex(z_func(t, terms, step) * np.exp(-1j * theta(t)))

# ===============================
# 5) Zero-finding utilities
# ===============================

def _bisection_limit(a, b, tol):
    """Iteration cap that a well-posed bracket never reaches."""
    width = abs(b - a)
    if tol > 0 and math.isfinite(width):
        ratio = width / tol
        if math.isfinite(ratio):
            if ratio <= 1.0:
                return BISECTION_SLACK
            return min(MAX_BISECTIONS, math.ceil(math.log2(ratio)) + BISECTION_SLACK)
    return MAX_BISECTIONS


def find_zero(a, b, tol=DEFAULT_TOL, terms=DEFAULT_TERMS, step=DERIVATIVE_STEP):
    """
    Bisection for a sign change of Z(t) in [a, b].

    Returns the midpoint of the first bracket narrower than 'tol', or None
    if Z(a) and Z(b) have the same sign. A bracket holding an even number
    of zeros looks exactly like one holding none.

    If 'tol' is below the float resolution near the bracket, the width
    stops shrinking; the search then gives up after a capped number of
    halvings and returns the current midpoint.
    """
    za = z_func(a, terms, step)
    zb = z_func(b, terms, step)
    if za * zb > 0:
        logger.debug(f"No sign change: Z({a})={za}, Z({b})={zb}")
        return None

    limit = _bisection_limit(a, b, tol)
    mid = (a + b) / 2.0
    for iteration in range(1, limit + 1):
        mid = (a + b) / 2.0
        zm = z_func(mid, terms, step)
        if (b - a) < tol:
            logger.debug(f"Bisection converged after {iteration} steps: t≈{mid}")
            return mid
        if za * zm > 0:
            a, za = mid, zm
        else:
            b, zb = mid, zm

    logger.warning(
        f"Bisection stopped after {limit} steps with width {b - a} >= tol {tol}; "
        f"returning t≈{mid}"
    )
    return mid


def estimate_t(n):
    """
    Estimate the ordinate t_n of the n-th nontrivial zero by solving

        N(t) = a*log(a) - a + 7/8 = n,   a = t/(2*pi)

    with exactly NEWTON_ITERATIONS Newton steps (dN/dt = log(a)/(2*pi)).
    The seed is 2*pi*n*log(n), raised to NEWTON_SEED_FLOOR when smaller.
    Returns 0.0 for n < 1.
    """
    if n < 1:
        return 0.0

    t = 2.0 * math.pi * n * math.log(n)
    if t < NEWTON_SEED_FLOOR:
        logger.debug(f"Newton seed {t} for n={n} raised to {NEWTON_SEED_FLOOR}")
        t = NEWTON_SEED_FLOOR

    for _ in range(NEWTON_ITERATIONS):
        a = t / (2.0 * math.pi)
        log_a = math.log(a)
        n_t = a * log_a - a + 7.0 / 8.0
        t -= (n_t - n) * (2.0 * math.pi / log_a)
    return t


def search_window(n, half_width=SEARCH_HALF_WIDTH):
    """Bracket (t_n - half_width, t_n + half_width) around estimate_t(n)."""
    est = estimate_t(n)
    return est - half_width, est + half_width
