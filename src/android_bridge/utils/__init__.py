"""Utility helpers for the Android bridge."""
