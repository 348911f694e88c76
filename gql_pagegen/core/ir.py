"""Intermediate representation shared by the page artifact generator.

These dataclasses describe a single GraphQL operation as seen by the
generator, and the code it produces for that operation.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class OperationDescriptor:
    """A GraphQL operation as supplied by the document collaborator.

    All names are already converted to their generated identifier form.
    """
    name: str  # e.g. "GetUserPage"
    operation_type: str  # 'query', 'mutation' or 'subscription'
    document_variable_name: str  # e.g. "GetUserPageDocument"
    operation_result_type: str  # e.g. "GetUserPageQuery"
    operation_variables_types: str  # e.g. "GetUserPageQueryVariables"

    def with_type_prefix(self, prefix: str) -> "OperationDescriptor":
        """Return a copy whose result and variables types carry `prefix`."""
        if not prefix:
            return self
        return replace(
            self,
            operation_result_type=prefix + self.operation_result_type,
            operation_variables_types=prefix + self.operation_variables_types,
        )


@dataclass(frozen=True)
class GeneratedArtifact:
    """The code fragments generated for one operation, in emission order."""
    fragments: tuple[str, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.fragments)

    def __str__(self) -> str:
        return "\n".join(self.fragments)
