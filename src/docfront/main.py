"""Run a documentation generation with loaded settings."""

import logging
import os

from docfront.backends.markdown import MarkdownBackend
from docfront.config import Config, load_settings
from docfront.diagnostics import WarningCollector
from docfront.generation.backend import GeneratorBackend
from docfront.generation.disk import DiskFileWriter
from docfront.generation.orchestrator import GenerationOrchestrator, GenerationResult
from docfront.logging_config import configure_logging
from docfront.model import PackageGraph

logger = logging.getLogger(__name__)


def create_warning_collector(settings: Config | None = None) -> WarningCollector:
    """Warning collector honouring the configured ignore list.

    Graph resolvers should hand this to the PackageGraph they build so that
    every warning of a run is filtered the same way.
    """
    settings = settings or load_settings()
    return WarningCollector(ignored=settings.warnings.ignored_warnings)


async def generate_documentation(
    graph: PackageGraph | None,
    output_directory: str | os.PathLike,
    backend: GeneratorBackend | None = None,
    settings: Config | None = None,
) -> GenerationResult:
    """Generate documentation for a graph into output_directory.

    Args:
        graph: Package graph to document, or None for an empty run.
        output_directory: Root for every generated file.
        backend: Backend to render with. Defaults to MarkdownBackend configured
            from the [output] section.
        settings: Configuration. Defaults to load_settings().

    Returns:
        GenerationResult of the run.
    """
    settings = settings or load_settings()
    configure_logging(settings.logging.level)

    if backend is None:
        backend = MarkdownBackend(settings.output)
    if graph is not None:
        warnings = graph.warnings
        warnings.ignored = warnings.ignored | settings.warnings.ignored_warnings
    else:
        warnings = create_warning_collector(settings)
    file_writer = DiskFileWriter(warnings=warnings, encoding=settings.output.encoding)

    orchestrator = GenerationOrchestrator(backend, file_writer)
    result = await orchestrator.generate(graph, output_directory)

    if warnings.count():
        logger.info(f"Found {warnings.count()} warnings")
    return result
