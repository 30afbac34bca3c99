# studiogen/emit/emitter.py
"""
Emitter: realizes a ProjectLayout on disk.

Fixed sequence, each step attempted exactly once:
  1. directories (libs, src, test, assets, jniLibs, res)
  2. AndroidManifest.xml  (manifest template, Pkg)
  3. build.gradle         (build template, Plugin)
  4. settings.gradle      (single newline)
  5. proguard-rules.pro   (fixed text)

A failing step is logged and recorded in the report; later steps still run.
No retries, no rollback.
"""
from __future__ import annotations

import logging
from typing import Callable, Mapping

from studiogen.core.constants import GRADLE_SETTINGS_TEXT
from studiogen.core.enums import ArtifactKind, Outcome
from studiogen.core.exceptions import (
    FileCreateError,
    MissingParentError,
    StudiogenError,
)
from studiogen.emit.templates import RAW_PROGUARD, TEMPLATES, substitute
from studiogen.layout.models import ArtifactResult, GenerationReport, ProjectLayout
from studiogen.utils.paths import ensure_dir, ensure_path

_log = logging.getLogger("studiogen.emit.emitter")


def render_template(
    template_text: str,
    destination_path: str,
    variables: Mapping[str, str],
    name: str = "template",
) -> None:
    """
    Create (or truncate) destination_path and write the rendered template.

    The file is opened before rendering, so a render failure leaves it empty.
    Undecodable argv bytes (lone surrogates) are written back as raw bytes.

    Raises:
        FileCreateError: destination cannot be opened for writing.
        TemplateRenderError: a placeholder has no value.
    """
    try:
        fh = open(destination_path, "w", encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise FileCreateError(destination_path, str(exc)) from exc
    with fh:
        fh.write(substitute(template_text, variables, name=name))


def write_text(destination_path: str, text: str) -> None:
    """Create (or truncate) destination_path and write text verbatim."""
    try:
        fh = open(destination_path, "w", encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise FileCreateError(destination_path, str(exc)) from exc
    with fh:
        fh.write(text)


def _ensure_parent(path: str) -> None:
    try:
        ensure_path(path)
    except MissingParentError:
        # bare filename: parent is the working directory
        _log.debug("%s has no parent component, writing in cwd", path)


class Emitter:
    """
    Runs the generation sequence for one layout.
    One instance per run; results accumulate in order.
    """

    def __init__(self, layout: ProjectLayout) -> None:
        self._layout = layout
        self._results: list[ArtifactResult] = []

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def run(self) -> GenerationReport:
        layout = self._layout
        for artifact in layout.artifacts():
            if artifact.kind != ArtifactKind.DIRECTORY:
                continue
            self._step(artifact.name, artifact.path, lambda p=artifact.path: ensure_dir(p))

        self._step("manifest", layout.manifest, self._emit_manifest)
        self._step("build_gradle", layout.gradle_build, self._emit_gradle_build)
        self._step(
            "settings_gradle",
            layout.gradle_settings,
            lambda: self._emit_text(layout.gradle_settings, GRADLE_SETTINGS_TEXT),
        )
        self._step(
            "proguard",
            layout.proguard,
            lambda: self._emit_text(layout.proguard, RAW_PROGUARD),
        )

        report = GenerationReport(results=tuple(self._results))
        _log.info(
            "generation finished: %d written, %d failed",
            len(report.written), len(report.failed),
        )
        return report

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _step(self, name: str, path: str, action: Callable[[], None]) -> None:
        try:
            action()
        except (StudiogenError, OSError) as exc:
            _log.error("%s failed: %s", name, exc)
            self._results.append(ArtifactResult(name, path, Outcome.FAILED, str(exc)))
            return
        self._results.append(ArtifactResult(name, path, Outcome.OK))

    def _emit_manifest(self) -> None:
        layout = self._layout
        if layout.package:
            _log.info("package name is %s", layout.package)
        else:
            _log.warning("using a blank package name")
        _ensure_parent(layout.manifest)
        render_template(
            TEMPLATES["manifest"],
            layout.manifest,
            {"Pkg": layout.package},
            name="manifest",
        )

    def _emit_gradle_build(self) -> None:
        layout = self._layout
        plugin = layout.plugin.value
        _log.info("using gradle plugin %s", plugin)
        _ensure_parent(layout.gradle_build)
        render_template(
            TEMPLATES["build_gradle"],
            layout.gradle_build,
            {"Plugin": plugin},
            name="build_gradle",
        )

    def _emit_text(self, path: str, text: str) -> None:
        _ensure_parent(path)
        write_text(path, text)


def generate(layout: ProjectLayout) -> GenerationReport:
    """Realize layout on disk. Never raises for per-artifact failures."""
    return Emitter(layout).run()
