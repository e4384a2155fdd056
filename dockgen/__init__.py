"""Detect project languages and generate Dockerfiles for them."""

from .errors import ArtifactWriteError, DockgenError, NoLanguageDetected
from .models import GeneratedArtifact, GenerateOutcome, Stage
from .orchestrator import Orchestrator

__version__ = "0.1.0"

__all__ = [
    "ArtifactWriteError",
    "DockgenError",
    "GenerateOutcome",
    "GeneratedArtifact",
    "NoLanguageDetected",
    "Orchestrator",
    "Stage",
]
