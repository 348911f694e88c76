"""Naming helpers for generated page symbols.

Operation names are converted to PascalCase by the document collaborator
and then reduced to a page key:

    GetUserPageQuery -> GetUser    (first "page", then first "query" removed)
    PageFooQuery     -> Foo
    FooPageBar       -> FooBar

Every symbol emitted for an operation is built from its page key:

    getServerPage<Key>, Page<Key>Comp, withPage<Key>, ssr<Key>
"""

import re
from dataclasses import dataclass

_PAGE_TOKEN = re.compile("page", re.IGNORECASE)
_QUERY_TOKEN = re.compile("query", re.IGNORECASE)


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def convert_name(name: str) -> str:
    """Convert a GraphQL operation name to its PascalCase identifier form."""
    words = re.split(r"[^0-9A-Za-z]+", to_snake_case(name).replace("_", " "))
    return "".join(word.capitalize() for word in words if word)


def derive_page_key(operation_name: str) -> str:
    """Derive the page key from a converted operation name.

    Only the first case-insensitive occurrence of each token is removed,
    so ``PagePageFooQuery`` becomes ``PageFoo``. No casing is applied.
    """
    without_page = _PAGE_TOKEN.sub("", operation_name, count=1)
    return _QUERY_TOKEN.sub("", without_page, count=1)


@dataclass(frozen=True)
class PageSymbols:
    """Names of the four symbols generated for one page key."""
    key: str

    @property
    def get_server_page(self) -> str:
        return f"getServerPage{self.key}"

    @property
    def component_type(self) -> str:
        return f"Page{self.key}Comp"

    @property
    def with_page(self) -> str:
        return f"withPage{self.key}"

    @property
    def ssr(self) -> str:
        return f"ssr{self.key}"
