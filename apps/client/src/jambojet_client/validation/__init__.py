"""Request validators, grouped by functional area."""
