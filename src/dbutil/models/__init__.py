"""Pydantic models and row containers used by dbutil."""
