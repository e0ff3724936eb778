"""Layer 0 — classification and the two independent run scans."""
