"""Shared utilities for the Lions team hub."""
