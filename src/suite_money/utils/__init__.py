"""Shared helpers for exact decimal arithmetic."""
