"""Domain layer: pure metric computations."""
