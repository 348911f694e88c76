"""Configuration for page artifact generation.

Raw configuration uses the camelCase keys of a codegen config file
(``apolloVersion``, ``excludePatterns``, ...). Snake_case field names are
accepted as well. Every option has a default, so an empty mapping is a
valid configuration.
"""

import logging
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

APOLLO_CLIENT_PATH = "@apollo/client"

# Legacy (Apollo 2) package per import group
LEGACY_IMPORT_PATHS = {
    "apollo_react_common_import_from": "@apollo/react-common",
    "apollo_react_hooks_import_from": "@apollo/react-hooks",
    "apollo_import_from": "apollo-client",
}

DEFAULT_CACHE_IMPORT_PATH = "apollo-cache-inmemory"


class PageConfig(BaseModel):
    """Resolved options for one generation run. Immutable once built."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    apollo_version: Literal[2, 3] = Field(
        2, description="Major Apollo client version the generated code targets."
    )
    apollo_react_common_import_from: str = Field(
        LEGACY_IMPORT_PATHS["apollo_react_common_import_from"],
        description="Module providing the Apollo React common helpers.",
    )
    apollo_react_hooks_import_from: str = Field(
        LEGACY_IMPORT_PATHS["apollo_react_hooks_import_from"],
        description="Module providing useQuery and QueryHookOptions.",
    )
    apollo_import_from: str = Field(
        LEGACY_IMPORT_PATHS["apollo_import_from"],
        description="Module imported as the Apollo namespace.",
    )
    apollo_cache_import_from: str = Field(
        DEFAULT_CACHE_IMPORT_PATH,
        description="Module providing NormalizedCacheObject.",
    )
    exclude_patterns: str | None = Field(
        None, description="Regular expression of operation names to skip."
    )
    exclude_patterns_options: str = Field(
        "", description="Flags applied to exclude_patterns (e.g. 'i')."
    )
    pre: str = Field("", description="Text placed before the generated code.")
    post: str = Field("", description="Text placed after the generated code.")
    custom_imports: str | None = Field(
        None, description="Extra import line added to the generated file."
    )
    import_operation_types_from: str | None = Field(
        None, description="Namespace prefixed to operation type references."
    )

    @model_validator(mode="before")
    @classmethod
    def _apply_version_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        # Explicit None means "not set", same as a missing key
        data = {key: value for key, value in data.items() if value is not None}
        version = data.get("apolloVersion", data.get("apollo_version", 2))
        for name, legacy_path in LEGACY_IMPORT_PATHS.items():
            if name in data or to_camel(name) in data:
                continue
            data[name] = APOLLO_CLIENT_PATH if version == 3 else legacy_path
        return data

    @property
    def type_prefix(self) -> str:
        """Prefix for result and variables type references."""
        if self.import_operation_types_from:
            return f"{self.import_operation_types_from}."
        return ""


class DocumentConfig(BaseModel):
    """Options of the operation document collaborator."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    documents_import_from: str = Field(
        "./operations",
        alias="importDocumentNodeExternallyFrom",
        description="Module exporting the operation documents as Operations.",
    )
    operation_types_path: str | None = Field(
        None,
        alias="operationTypesPath",
        description="Module imported under the operation types namespace.",
    )
    dedupe_operation_suffix: bool = Field(
        False,
        alias="dedupeOperationSuffix",
        description="Do not repeat the operation type suffix on result types.",
    )


def resolve_config(raw: Mapping[str, Any] | None = None) -> PageConfig:
    """Resolve raw user options into a PageConfig.

    Explicit values win. The three Apollo import paths default to
    ``@apollo/client`` for Apollo 3 and to the legacy packages otherwise.

    Raises:
        ConfigError: If a provided value has the wrong type.
    """
    try:
        config = PageConfig.model_validate(dict(raw or {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    logger.debug("Resolved config: %s", config)
    return config


def _camel_key(key: str) -> str:
    return to_camel(key) if "_" in key else key


def _read_yaml(path: str | Path) -> dict[str, Any]:
    try:
        content = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return content


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> tuple[PageConfig, DocumentConfig]:
    """Load page and document options from a YAML file.

    Args:
        path: Optional YAML file. Its top-level keys are page options; an
            optional ``documents`` mapping holds document options.
        overrides: Page options that take precedence over the file, e.g.
            from command-line flags. None values are ignored.

    Returns:
        The resolved page config and document config.
    """
    raw = _read_yaml(path) if path else {}
    document_raw = raw.pop("documents", None) or {}
    if not isinstance(document_raw, dict):
        raise ConfigError("'documents' must be a mapping")

    raw = {_camel_key(key): value for key, value in raw.items()}
    for key, value in (overrides or {}).items():
        if value is not None:
            raw[_camel_key(key)] = value

    try:
        document_config = DocumentConfig.model_validate(document_raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid documents configuration: {e}") from e
    return resolve_config(raw), document_config
