"""Life Lag services."""
