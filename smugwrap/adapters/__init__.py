"""Adapters implementing smugwrap protocols."""
