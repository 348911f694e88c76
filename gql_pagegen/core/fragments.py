"""Rendering of the page-level code fragments for one operation.

Each operation produces four TypeScript fragments, in this order:

1. get_server_page.ts.j2 - getServerPage<Key>, fetches the operation on
   the server and returns the extracted Apollo cache as page props
2. page_component.ts.j2 - Page<Key>Comp, the wrapped component type
3. with_page.ts.j2 - withPage<Key>, wraps a component with useQuery
4. ssr_descriptor.ts.j2 - ssr<Key>, bundles the two functions

Custom templates with the same names can be supplied via template_dir:
    renderer = FragmentRenderer(template_dir="./my_templates")
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import PageConfig
from .ir import GeneratedArtifact, OperationDescriptor
from .naming import PageSymbols

FRAGMENT_TEMPLATES = (
    "get_server_page.ts.j2",
    "page_component.ts.j2",
    "with_page.ts.j2",
    "ssr_descriptor.ts.j2",
)


class FragmentRenderer:
    """Renders fragment templates for operations."""

    def __init__(self, template_dir: str | None = None):
        """Initialize the renderer.

        Args:
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_pagegen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
        )

    def render(
        self,
        operation: OperationDescriptor,
        page_key: str,
        config: PageConfig | None = None,
    ) -> GeneratedArtifact:
        """Render all fragments for `operation`, dropping empty ones."""
        context = {
            "operation": operation,
            "symbols": PageSymbols(page_key),
            "config": config,
        }
        rendered = (
            self.env.get_template(name).render(context).strip()
            for name in FRAGMENT_TEMPLATES
        )
        return GeneratedArtifact(tuple(f for f in rendered if f))


@lru_cache(maxsize=1)
def default_renderer() -> FragmentRenderer:
    """Renderer using only the built-in templates."""
    return FragmentRenderer()


def assemble_fragments(
    operation: OperationDescriptor,
    page_key: str,
    config: PageConfig | None = None,
    renderer: FragmentRenderer | None = None,
) -> GeneratedArtifact:
    """Build the four page fragments for a (non-excluded) operation.

    All symbol names come from `page_key`, so the fragments reference
    each other without any later fix-up.
    """
    return (renderer or default_renderer()).render(operation, page_key, config)
