"""Operation documents parsed with graphql-core.

The page generator does not parse documents itself. It works against the
BaseDocument protocol, which exposes the import lines of the base
document code and the operations collected from it. OperationDocument is
the built-in implementation over .graphql/.gql files.
"""

import logging
import os
from typing import Protocol, Sequence, runtime_checkable

from graphql import GraphQLError, OperationDefinitionNode, Source, parse

from .config import DocumentConfig
from .exceptions import DocumentError
from .ir import OperationDescriptor
from .naming import convert_name

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = (".graphql", ".gql")


@runtime_checkable
class BaseDocument(Protocol):
    """Protocol for the document code the page fragments build on.

    Example:
        class StaticDocument:
            def base_imports(self):
                return ["import * as Operations from './ops';"]

            def collected_operations(self):
                return [OperationDescriptor(...)]
    """

    def base_imports(self) -> Sequence[str]:
        """Import lines required by the base document code."""
        ...

    def collected_operations(self) -> Sequence[OperationDescriptor]:
        """Operations found in the document, in document order."""
        ...


class OperationDocument:
    """Collects named operations from GraphQL documents."""

    def __init__(
        self,
        config: DocumentConfig | None = None,
        types_namespace: str | None = None,
    ):
        """Initialize an empty document.

        Args:
            config: Document options (documents module, type suffixes).
            types_namespace: Namespace the operation types are imported
                under, usually PageConfig.import_operation_types_from.
        """
        self.config = config or DocumentConfig()
        self.types_namespace = types_namespace
        self._operations: list[OperationDescriptor] = []

    @classmethod
    def from_path(
        cls,
        path: str,
        config: DocumentConfig | None = None,
        types_namespace: str | None = None,
    ) -> "OperationDocument":
        """Collect operations from a document file or directory."""
        document = cls(config, types_namespace)
        for file_path in collect_document_files(path):
            try:
                with open(file_path) as f:
                    content = f.read()
            except OSError as e:
                raise DocumentError(file_path, e) from e
            document.add_source(content, name=os.path.basename(file_path))
        logger.info(
            "Collected %d operations from %s", len(document.collected_operations()), path
        )
        return document

    def add_source(self, content: str, name: str = "GraphQL request") -> None:
        """Parse `content` and collect its named operations.

        Raises:
            DocumentError: If the content is not valid GraphQL syntax.
        """
        try:
            ast = parse(Source(content, name))
        except GraphQLError as e:
            raise DocumentError(name, e) from e

        for definition in ast.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                continue
            if definition.name is None:
                logger.warning("Skipping anonymous operation in %s", name)
                continue
            self._operations.append(self._describe(definition))

    def _describe(self, node: OperationDefinitionNode) -> OperationDescriptor:
        name = convert_name(node.name.value)
        operation_type = node.operation.value
        suffix = convert_name(operation_type)
        if self.config.dedupe_operation_suffix and name.endswith(suffix):
            result_type = name
        else:
            result_type = f"{name}{suffix}"
        return OperationDescriptor(
            name=name,
            operation_type=operation_type,
            document_variable_name=f"{name}Document",
            operation_result_type=result_type,
            operation_variables_types=f"{result_type}Variables",
        )

    def base_imports(self) -> list[str]:
        if not self._operations:
            return []
        imports = [f"import * as Operations from '{self.config.documents_import_from}';"]
        if self.types_namespace and self.config.operation_types_path:
            imports.append(
                f"import * as {self.types_namespace} from '{self.config.operation_types_path}';"
            )
        return imports

    def collected_operations(self) -> list[OperationDescriptor]:
        return list(self._operations)


def collect_document_files(path: str) -> list[str]:
    """Collect all .graphql/.gql files from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(DOCUMENT_EXTENSIONS):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(DOCUMENT_EXTENSIONS):
                    files.append(os.path.join(root, filename))
    return sorted(files)
