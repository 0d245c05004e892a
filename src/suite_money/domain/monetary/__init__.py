"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and Money calculations with exact decimal
arithmetic, allocation and conversion.
"""
