"""
Core arithmetic primitives, serialized value models and contracts.

This package is independent of any I/O: values are parsed from decimal
strings and rendered back to decimal strings by the caller.
"""
