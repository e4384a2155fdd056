"""Core data models shared across dockgen components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass
class Stage:
    """One handler's generated Dockerfile block and the dependencies behind it."""

    language: str
    dependencies: List[str]
    content: str


@dataclass
class GeneratedArtifact:
    """Dockerfile text produced for a directory, with per-language stages."""

    root: str
    content: str
    stages: List[Stage] = field(default_factory=list)

    @property
    def languages(self) -> List[str]:
        return [stage.language for stage in self.stages]

    @property
    def multi_stage(self) -> bool:
        return len(self.stages) > 1

    def dependency_report(self) -> Dict[str, List[str]]:
        """Return sorted dependency names keyed by language, in stage order."""
        return {stage.language: list(stage.dependencies) for stage in self.stages}


@dataclass
class GenerateOutcome:
    """Result of a generate run."""

    artifact: GeneratedArtifact
    path: Path
    written: bool
