"""Layer 2 — wall ranking."""
