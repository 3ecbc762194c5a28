"""Utilities for rapi."""
