"""Aggregation helpers.

This package holds the running-total logic used while rows are normalized:
parsing currency-like text into numbers and formatting totals for report
headers.
"""
