"""Board file parsing, settings loading and shared constants."""
