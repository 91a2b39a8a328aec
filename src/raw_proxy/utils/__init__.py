"""Utility helpers for raw-proxy."""
