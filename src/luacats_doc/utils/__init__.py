"""Utility functions for luacats-doc."""
