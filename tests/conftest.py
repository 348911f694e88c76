"""Shared fixtures for gql-pagegen tests."""

import pytest

from gql_pagegen.core.config import resolve_config
from gql_pagegen.core.ir import OperationDescriptor


class StubDocument:
    """Minimal BaseDocument with fixed imports and operations."""

    def __init__(self, imports=None, operations=None):
        self._imports = list(imports or [])
        self._operations = list(operations or [])

    def base_imports(self):
        return list(self._imports)

    def collected_operations(self):
        return list(self._operations)


def _make_operation(name: str, operation_type: str = "query") -> OperationDescriptor:
    result_type = f"{name}{operation_type.capitalize()}"
    return OperationDescriptor(
        name=name,
        operation_type=operation_type,
        document_variable_name=f"{name}Document",
        operation_result_type=result_type,
        operation_variables_types=f"{result_type}Variables",
    )


@pytest.fixture
def make_operation():
    """Factory for descriptors named the way OperationDocument names them."""
    return _make_operation


@pytest.fixture
def make_document():
    """Factory for stub base documents."""
    return StubDocument


@pytest.fixture
def default_config():
    return resolve_config({})


@pytest.fixture
def v3_config():
    return resolve_config({"apolloVersion": 3})


@pytest.fixture
def user_page_operation():
    """The UserPage query, whose page key is "User"."""
    return _make_operation("UserPage")
