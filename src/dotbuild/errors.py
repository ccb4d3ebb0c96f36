"""Exception hierarchy for dotbuild.

Building a graph never raises for well-formed input; everything here is
raised at the boundaries: the external renderer and description files.
"""


class DotbuildError(Exception):
    """Base class for all dotbuild errors."""


class RenderError(DotbuildError):
    """Rendering DOT source through an external tool failed.

    The underlying exception, when there is one, is chained as ``__cause__``.
    """

    def __init__(self, message: str, format: str | None = None, stderr: str | None = None):
        super().__init__(message)
        self.format = format
        self.stderr = stderr


class ExecutableNotFound(RenderError):
    """The layout engine executable could not be found on PATH."""

    def __init__(self, engine: str, format: str | None = None):
        super().__init__(
            f"failed to execute '{engine}', make sure the Graphviz executables are on your PATH",
            format=format,
        )
        self.engine = engine


class DescriptionError(DotbuildError, ValueError):
    """A graph description file is unreadable or invalid."""
