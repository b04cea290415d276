"""Core body composition model: value objects and ports."""
