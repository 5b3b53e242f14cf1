"""Rectangles and the free functions that combine them."""
