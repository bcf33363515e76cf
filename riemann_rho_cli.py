#!/usr/bin/env python3
"""
riemann_rho_cli.py

Command-line front end: locate a nontrivial zero of zeta(1/2 + i*t) with the
Riemann–Siegel Z-function and bisection, then optionally plot Z(t) with D3.js.

Usage examples:
    riemann-rho 14 15                  # bracket [14, 15], tol 1e-10
    riemann-rho 14 15 1e-8 --no-plot
    riemann-rho --nth 100 --high-order
    riemann-rho                        # asks for the bracket on stdin

The result is cross-checked against mpmath's siegelz (and zetazero in
--nth mode). It is NOT a proof, just a numeric experiment.
"""

import argparse
import logging
import math
import os
import sys

import mpmath as mp

import riemann_rho as rr
import riemann_rho_plot as rplot
from riemann_rho_checks import checked_find_zero, require_index

# =======================
# 1) CONFIGURE PARAMETERS
# =======================

# mpmath precision for the reference check
REFERENCE_PREC = 80

# If |Z_ref(root)| < CHECK_TOL => PASS
CHECK_TOL = 1e-2

# Finite-difference step used with --high-order unless --step is given
HIGH_ORDER_STEP = 2e-3

# Beyond this the estimated ordinate is not worth bisecting
HUGE_ESTIMATE = 1e30

logger = logging.getLogger("RiemannRho")

# =========================
# 2) LOGGING SETUP FUNCTION
# =========================

def setup_logger(log_file=None, level=logging.INFO):
    """
    Configures the "RiemannRho" logger to print to the console and,
    if log_file is given, to append to that file as well.
    Repeated calls add only the handlers that are still missing.
    """
    logger.setLevel(level)

    log_format = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(log_format)
        logger.addHandler(console_handler)

    # File handler
    if log_file and not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file)
        for h in logger.handlers
    ):
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(log_format)
        logger.addHandler(file_handler)

    return logger

# =========================
# 3) ARGUMENTS & PROMPTS
# =========================

def build_parser():
    ap = argparse.ArgumentParser(
        prog="riemann-rho",
        description="Approximate a nontrivial zero of the Riemann zeta function "
                    "via the Riemann-Siegel Z-function.",
    )
    ap.add_argument("low", nargs="?", type=float, help="lower end of the bracket")
    ap.add_argument("high", nargs="?", type=float, help="upper end of the bracket")
    ap.add_argument("tol", nargs="?", type=float, default=rr.DEFAULT_TOL,
                    help=f"bisection tolerance (default {rr.DEFAULT_TOL})")
    ap.add_argument("--nth", type=float, default=None,
                    help="search around the estimated n-th zero instead of a bracket")
    ap.add_argument("--half-width", type=float, default=rr.SEARCH_HALF_WIDTH,
                    help="half-width of the bracket used with --nth")
    ap.add_argument("--high-order", action="store_true",
                    help=f"add both correction terms (terms={rr.HIGH_ORDER_TERMS})")
    ap.add_argument("--terms", type=int, choices=[0, 1, 2], default=None,
                    help="number of correction terms (overrides --high-order)")
    ap.add_argument("--step", type=float, default=None,
                    help="finite-difference step for the correction kernel")
    plot = ap.add_mutually_exclusive_group()
    plot.add_argument("--plot", dest="plot", action="store_true", default=None,
                      help="write the D3.js plot without asking")
    plot.add_argument("--no-plot", dest="plot", action="store_false",
                      help="skip the plot without asking")
    ap.add_argument("--output", default=rplot.PLOT_FILE,
                    help=f"plot file (default {rplot.PLOT_FILE})")
    ap.add_argument("--log-file", default=None, help="also append log lines to this file")
    return ap


def resolve_terms(args):
    if args.terms is not None:
        return args.terms
    return rr.HIGH_ORDER_TERMS if args.high_order else rr.DEFAULT_TERMS


def resolve_step(args, terms):
    if args.step is not None:
        return args.step
    return HIGH_ORDER_STEP if terms >= 2 else rr.DERIVATIVE_STEP


def prompt_float(message):
    """Ask on stdin for a float; ValueError on malformed input."""
    answer = input(message + "\n")
    try:
        return float(answer.strip())
    except ValueError:
        raise ValueError(f"not a number: {answer.strip()!r}") from None


def prompt_bracket():
    low = prompt_float("Enter low bound (or use --nth to search around the n-th zero):")
    high = prompt_float("Enter high bound:")
    tol = prompt_float(f"Enter tolerance (e.g., {rr.DEFAULT_TOL}):")
    return low, high, tol


def wants_plot(args):
    if args.plot is not None:
        return args.plot
    answer = input("Do you want a D3.js visualization? (yes/no)\n")
    return answer.strip().lower() == "yes"

# =========================
# 4) REFERENCE CHECK
# =========================

def reference_check(root, n=None):
    """
    Compare the root with mpmath: |siegelz(root)| against CHECK_TOL,
    and in --nth mode the distance to zetazero(n).
    """
    with mp.workprec(REFERENCE_PREC):
        z_ref = float(mp.siegelz(root))
        result_str = "PASS" if abs(z_ref) < CHECK_TOL else "FAIL"
        logger.info(f"  Reference check: Z_ref(t)={z_ref}, |Z_ref|={abs(z_ref)}, {result_str}")
        if n is not None and float(n).is_integer():
            t_ref = float(mp.im(mp.zetazero(int(n))))
            logger.info(f"  mpmath zetazero({int(n)}) = {t_ref}, deviation {root - t_ref}")
    return result_str

# =========================
# 5) MAIN
# =========================

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logger(args.log_file)

    terms = resolve_terms(args)
    step = resolve_step(args, terms)
    tol = args.tol

    try:
        if args.nth is not None:
            require_index(args.nth)
            low, high = rr.search_window(args.nth, args.half_width)
            est = (low + high) / 2.0
            if not math.isfinite(est) or est > HUGE_ESTIMATE:
                logger.warning(
                    f"n={args.nth} is extremely large; computation may take forever or overflow."
                )
            logger.info(f"Estimated t_{args.nth} ≈ {est}; searching [{low}, {high}]")
        elif args.low is not None and args.high is not None:
            low, high = args.low, args.high
        else:
            low, high, tol = prompt_bracket()

        logger.info(f"Bisection: tol={tol}, terms={terms}, step={step}")
        zero = checked_find_zero(low, high, tol, terms, step)
    except EOFError:
        logger.error("Invalid input: stdin closed before a value was entered")
        return 2
    except ValueError as exc:
        logger.error(f"Invalid input: {exc}")
        return 2

    if zero is not None:
        logger.info(f"Approximate imaginary part of the nontrivial zero: {zero:.10f}")
        reference_check(zero, args.nth)
    else:
        logger.info(
            f"No sign change detected in [{low}, {high}]. Adjust interval or try smaller n."
        )

    try:
        plot_requested = wants_plot(args)
    except EOFError:
        logger.error("Invalid input: stdin closed before answering the plot prompt")
        return 2

    if plot_requested:
        try:
            rplot.generate_d3_plot(low, high, zero, terms, path=args.output, step=step)
        except OSError as exc:
            logger.error(f"Error generating plot: {exc}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
