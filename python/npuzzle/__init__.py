"""Optimal sliding puzzle solver."""
