"""Import statements required by the generated page fragments."""

import logging
from dataclasses import dataclass, field

from .config import PageConfig
from .documents import BaseDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSet:
    """Ordered set of unique import lines.

    The set only grows: `add` returns an ImportSet with the unseen lines
    appended in order, leaving the receiver untouched.

    Example:
        imports = ImportSet().add("import React from 'react';")
        imports = imports.add("import React from 'react';")  # no-op
    """
    lines: tuple[str, ...] = field(default_factory=tuple)

    def add(self, *lines: str) -> "ImportSet":
        new_lines = list(self.lines)
        for line in lines:
            if line not in new_lines:
                new_lines.append(line)
        if len(new_lines) == len(self.lines):
            return self
        return ImportSet(tuple(new_lines))

    def __contains__(self, line: object) -> bool:
        return line in self.lines

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def page_import_lines(config: PageConfig) -> list[str]:
    """Return the import lines used by the page fragments."""
    lines = [
        "import { NextPage } from 'next';",
        "import { NextRouter, useRouter } from 'next/router';",
        f"import {{ QueryHookOptions, useQuery }} from '{config.apollo_react_hooks_import_from}';",
        f"import * as Apollo from '{config.apollo_import_from}';",
        "import React from 'react';",
        f"import {{ NormalizedCacheObject }} from '{config.apollo_cache_import_from}';",
    ]
    if config.custom_imports:
        lines.append(config.custom_imports)
    return lines


def collect_imports(
    config: PageConfig,
    base: BaseDocument,
    imports: ImportSet | None = None,
) -> list[str]:
    """Merge the base document imports with the page imports.

    Args:
        config: Resolved page config.
        base: Document collaborator supplying base imports and operations.
        imports: Lines accumulated while emitting operations.

    Returns:
        The base imports alone when the document has no operations,
        otherwise the base imports followed by the page imports.
    """
    base_imports = list(base.base_imports())
    if not base.collected_operations():
        logger.debug("No operations collected, skipping page imports")
        return base_imports

    page_imports = (imports or ImportSet()).add(*page_import_lines(config))
    return base_imports + list(page_imports)
