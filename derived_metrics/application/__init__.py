"""Application layer: engine wiring and orchestrators."""

from .engine import MetricsEngine, create_metrics_engine
from .training.orchestrators import SessionAnalysis, SessionOrchestrator

__all__ = [
    "MetricsEngine",
    "create_metrics_engine",
    "SessionAnalysis",
    "SessionOrchestrator",
]
