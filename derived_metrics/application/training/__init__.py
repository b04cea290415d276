"""Training application services."""
