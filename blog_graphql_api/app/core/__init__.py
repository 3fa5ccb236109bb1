"""Configuration, logging, errors and the in‑memory entity store."""
