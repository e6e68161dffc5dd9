"""Utility helpers for commitinfo."""
