# studiogen/core/enums.py
"""
Canonical enums for the generator.
Plugin values are written into build.gradle verbatim.
"""
from enum import Enum

from studiogen.core.constants import PLUGIN_APPLICATION, PLUGIN_LIBRARY


class ArtifactKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class Plugin(str, Enum):
    LIBRARY = PLUGIN_LIBRARY
    APPLICATION = PLUGIN_APPLICATION

    @classmethod
    def for_project(cls, is_app: bool) -> "Plugin":
        return cls.APPLICATION if is_app else cls.LIBRARY


class Outcome(str, Enum):
    OK = "ok"
    FAILED = "failed"
