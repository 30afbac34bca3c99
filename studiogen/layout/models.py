# studiogen/layout/models.py
"""
Data models for the planned project layout.
All fields are immutable after construction (frozen dataclasses).
No filesystem access here, only data containers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from studiogen.core.enums import ArtifactKind, Outcome, Plugin


@dataclass(frozen=True)
class PlannedArtifact:
    name: str
    path: str
    kind: ArtifactKind


@dataclass(frozen=True)
class ProjectLayout:
    """
    Resolved paths for one generated project.
    Built once from CLI input, consumed once by the emitter.

    App
    ├── libs
    ├── src
    │   ├── androidTest
    │   │   └── java
    │   └── main
    │       ├── assets
    │       ├── java
    │       ├── jniLibs
    │       ├── res
    │       └── AndroidManifest.xml
    ├── build.gradle
    ├── proguard-rules.pro
    └── settings.gradle
    """
    libs: str
    src: str
    test: str
    assets: str
    jni_libs: str
    res: str
    manifest: str
    gradle_build: str
    gradle_settings: str
    proguard: str
    package: str = ""
    is_app: bool = False

    @property
    def plugin(self) -> Plugin:
        return Plugin.for_project(self.is_app)

    def directories(self) -> tuple[str, ...]:
        """The six directory paths, in creation order."""
        return (self.libs, self.src, self.test, self.assets, self.jni_libs, self.res)

    def artifacts(self) -> tuple[PlannedArtifact, ...]:
        """Every artifact in generation order, with an explicit kind."""
        d, f = ArtifactKind.DIRECTORY, ArtifactKind.FILE
        return (
            PlannedArtifact("libs", self.libs, d),
            PlannedArtifact("src", self.src, d),
            PlannedArtifact("test", self.test, d),
            PlannedArtifact("assets", self.assets, d),
            PlannedArtifact("jni_libs", self.jni_libs, d),
            PlannedArtifact("res", self.res, d),
            PlannedArtifact("manifest", self.manifest, f),
            PlannedArtifact("build_gradle", self.gradle_build, f),
            PlannedArtifact("settings_gradle", self.gradle_settings, f),
            PlannedArtifact("proguard", self.proguard, f),
        )


@dataclass(frozen=True)
class ArtifactResult:
    name: str
    path: str
    outcome: Outcome
    error: Optional[str] = None


@dataclass(frozen=True)
class GenerationReport:
    results: tuple[ArtifactResult, ...]

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def failed(self) -> list[ArtifactResult]:
        return [r for r in self.results if r.outcome == Outcome.FAILED]

    @property
    def written(self) -> list[ArtifactResult]:
        return [r for r in self.results if r.outcome == Outcome.OK]
