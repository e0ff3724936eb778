"""Layer 3 — level assembly."""
