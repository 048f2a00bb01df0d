"""Monetary domain package.

This package contains the `Money` value type, the `Round` policies it rounds
with, and the errors raised by monetary arithmetic. Amounts are stored as
scaled integers, so arithmetic is exact until an operation explicitly rounds.
"""
