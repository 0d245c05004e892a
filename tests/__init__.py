"""Test package root. Subdirectories have no __init__.py and are collected as namespace packages."""
