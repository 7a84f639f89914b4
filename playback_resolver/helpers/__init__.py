"""Helpers for the playback resolver."""
