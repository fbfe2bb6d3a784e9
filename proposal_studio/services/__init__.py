"""Services for the wedding proposal studio."""

from .gemini_client import GeminiClient, get_gemini_client
from .project_store import ProjectStore, get_project_store
from .studio_orchestrator import StudioOrchestrator, get_orchestrator

__all__ = [
    "GeminiClient",
    "get_gemini_client",
    "ProjectStore",
    "get_project_store",
    "StudioOrchestrator",
    "get_orchestrator",
]
