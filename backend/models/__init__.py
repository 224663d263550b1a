"""Pydantic contracts for the watch-history pipeline."""
