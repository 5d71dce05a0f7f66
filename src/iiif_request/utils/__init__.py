"""Shared utilities: structured logging and numeric formatting."""
