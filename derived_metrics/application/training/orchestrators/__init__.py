"""Training orchestrators."""

from .session_orchestrator import SessionAnalysis, SessionOrchestrator

__all__ = ["SessionAnalysis", "SessionOrchestrator"]
