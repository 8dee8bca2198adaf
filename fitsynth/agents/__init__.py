"""Gemini-backed generators."""
