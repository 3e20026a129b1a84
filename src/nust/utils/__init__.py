"""Utility helpers for nust."""
