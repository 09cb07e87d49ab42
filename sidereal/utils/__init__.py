"""Utility functions and helpers for the sidereal package.

Modules:
    constants: Astronomical constants used by the sidereal time polynomial.
    maths: Euclidean (always non-negative) modular reduction.
    validationutils: Input validation for strict mode.
"""
