"""Core modules for page artifact generation."""

from .config import DocumentConfig, PageConfig, load_config, resolve_config
from .documents import BaseDocument, OperationDocument
from .emitter import PageGenerator, emit_operation
from .exceptions import ConfigError, DocumentError, InvalidPatternError, PageGenError
from .filtering import should_exclude
from .fragments import FragmentRenderer, assemble_fragments
from .imports import ImportSet, collect_imports, page_import_lines
from .ir import GeneratedArtifact, OperationDescriptor
from .naming import PageSymbols, convert_name, derive_page_key

__all__ = [
    # IR types
    "GeneratedArtifact",
    "OperationDescriptor",
    # Config
    "DocumentConfig",
    "PageConfig",
    "load_config",
    "resolve_config",
    # Naming and filtering
    "PageSymbols",
    "convert_name",
    "derive_page_key",
    "should_exclude",
    # Fragments and imports
    "FragmentRenderer",
    "assemble_fragments",
    "ImportSet",
    "collect_imports",
    "page_import_lines",
    # Emission
    "BaseDocument",
    "OperationDocument",
    "PageGenerator",
    "emit_operation",
    # Errors
    "ConfigError",
    "DocumentError",
    "InvalidPatternError",
    "PageGenError",
]
