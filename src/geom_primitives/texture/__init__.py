"""Texture sizing helpers."""
