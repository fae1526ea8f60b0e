"""Core utilities and exceptions."""
