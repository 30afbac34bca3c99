# studiogen/emit: writes the planned layout to disk
# The only package that creates files or directories.
from studiogen.emit.emitter import Emitter, generate, render_template, write_text
from studiogen.emit.templates import TEMPLATES, substitute

__all__ = ["Emitter", "generate", "render_template", "write_text", "TEMPLATES", "substitute"]
