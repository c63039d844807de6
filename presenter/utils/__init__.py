"""Shared utilities: logging configuration and operation timing."""
