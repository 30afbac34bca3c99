# studiogen/core/exceptions.py
"""
All custom exceptions for studiogen.
Granular exception types let the emitter log and skip a single artifact
without aborting the rest of the run.
"""


class StudiogenError(Exception):
    """Base exception for all studiogen errors."""


# --- Paths ---

class PathError(StudiogenError):
    """Path could not be turned into a directory."""


class MissingParentError(PathError):
    """File-like path with no '/'. Must contain 'no parent directory' in message."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"no parent directory in path, may only be a file in root: {path!r}")


# --- Emit ---

class EmitError(StudiogenError):
    """Base for artifact emission errors."""


class FileCreateError(EmitError):
    """Artifact file could not be created or opened for writing."""
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        msg = f"cannot create file {path!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class TemplateRenderError(EmitError):
    """Placeholder substitution failed. Must contain 'template' in message."""
    def __init__(self, template_name: str, variable: str):
        self.template_name = template_name
        self.variable = variable
        super().__init__(f"template {template_name!r}: no value for {{{{.{variable}}}}}")
