"""Fixture stream loading."""
