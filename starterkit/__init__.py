"""Starter content grants and expired session cleanup."""
