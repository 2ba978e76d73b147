"""Core infrastructure: settings, logging and the in‑memory catalog."""
