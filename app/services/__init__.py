"""Signup, password, store and session services."""
