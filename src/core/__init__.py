"""
Core domain models and invariants of the Elbonian numeral system.

This package contains the foundational building blocks (numeral table,
canonical encoding, input classification, error taxonomy) that the validation grammar and
the converter are built on.
"""
