"""Renderer backed by the Graphviz command line tools."""

import logging
import subprocess

from ..errors import ExecutableNotFound, RenderError
from .framework import OutputFormat, Renderer

logger = logging.getLogger(__name__)


class GraphvizRenderer(Renderer):
    """Pipes DOT source through ``<engine> -T<format>``."""

    def __init__(self, engine: str = "dot", timeout: float | None = None):
        self.engine = engine
        self.timeout = timeout

    @property
    def name(self) -> str:
        return self.engine

    def command(self, format: OutputFormat) -> list[str]:
        return [self.engine, f"-T{format.value}"]

    def render(self, source: bytes, format: OutputFormat) -> bytes:
        cmd = self.command(format)
        logger.info(f"Rendering {len(source)} bytes of DOT with {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                input=source,
                capture_output=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ExecutableNotFound(self.engine, format=format.value) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            message = f"{self.engine} exited with status {e.returncode}"
            if stderr:
                message += f": {stderr}"
            raise RenderError(message, format=format.value, stderr=stderr) from e
        except subprocess.TimeoutExpired as e:
            raise RenderError(f"{self.engine} timed out after {e.timeout} seconds", format=format.value) from e
        except OSError as e:
            raise RenderError(f"failed to run {self.engine}: {e}", format=format.value) from e

        logger.debug(f"{self.engine} produced {len(proc.stdout)} bytes of {format.value}")
        return proc.stdout
