# src/docfront/generation/__init__.py
"""Documentation generation front end."""

from docfront.generation.backend import FileWriter, GeneratorBackend
from docfront.generation.disk import DiskFileWriter
from docfront.generation.filters import filter_canonical, filter_non_documented
from docfront.generation.orchestrator import GenerationOrchestrator, GenerationResult
from docfront.generation.policy import (
    CONTAINER_POLICIES,
    LIBRARY_CONTAINERS,
    LIBRARY_TOP_LEVEL,
    ContainerPolicy,
)
from docfront.generation.session import (
    FileCreatedChannel,
    FileCreatedListener,
    GenerationScopeError,
    GenerationSession,
    resolve_output_path,
)

__all__ = [
    # Backend contract
    "FileWriter",
    "GeneratorBackend",
    # Orchestration
    "GenerationOrchestrator",
    "GenerationResult",
    # Sessions and write tracking
    "GenerationSession",
    "GenerationScopeError",
    "FileCreatedChannel",
    "FileCreatedListener",
    "resolve_output_path",
    "DiskFileWriter",
    # Filtering policy
    "filter_non_documented",
    "filter_canonical",
    "ContainerPolicy",
    "CONTAINER_POLICIES",
    "LIBRARY_CONTAINERS",
    "LIBRARY_TOP_LEVEL",
]
