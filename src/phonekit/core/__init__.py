"""Normalization, parsing and candidate generation."""
