# studiogen/layout: path planning
# Computes every target path up front; the emitter never builds paths itself.
from studiogen.layout.models import (
    ArtifactResult,
    GenerationReport,
    PlannedArtifact,
    ProjectLayout,
)
from studiogen.layout.planner import plan_layout

__all__ = [
    "plan_layout",
    "ProjectLayout",
    "PlannedArtifact",
    "ArtifactResult",
    "GenerationReport",
]
