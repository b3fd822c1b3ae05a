"""Utility helpers for undigraph."""
