"""
Test suite for exact-arith

Contains:
- tests/unit/          : Unit tests for BigInt, Rational, payloads, contracts, calculator
"""
