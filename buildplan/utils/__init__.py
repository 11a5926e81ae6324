"""Utility helpers for buildplan."""
