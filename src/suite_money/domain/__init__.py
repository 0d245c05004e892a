"""Domain model: monetary value objects and conversion policies."""
