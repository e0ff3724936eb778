"""Layer 1 — reconciliation of the horizontal and vertical run lists."""
