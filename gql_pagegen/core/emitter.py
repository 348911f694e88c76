"""Per-operation emission and whole-document page generation.

emit_operation is a pure function: it takes the config, one operation and
the imports accumulated so far, and returns the generated code together
with the grown import set.

    imports = ImportSet()
    for op in document.collected_operations():
        code, imports = emit_operation(config, op, imports)
"""

import logging

from .config import PageConfig
from .documents import BaseDocument
from .filtering import should_exclude
from .fragments import FragmentRenderer, assemble_fragments
from .hooks import HookRunner, hooks_from_config
from .imports import ImportSet, collect_imports, page_import_lines
from .ir import OperationDescriptor
from .naming import derive_page_key

logger = logging.getLogger(__name__)


def emit_operation(
    config: PageConfig,
    operation: OperationDescriptor,
    imports: ImportSet,
    renderer: FragmentRenderer | None = None,
) -> tuple[str, ImportSet]:
    """Generate the page code for one operation.

    Returns:
        The joined fragments (empty for an excluded operation) and the
        import set extended with the lines the fragments need.

    Raises:
        InvalidPatternError: If the exclusion pattern is malformed.
    """
    operation = operation.with_type_prefix(config.type_prefix)

    if should_exclude(operation.name, config.exclude_patterns, config.exclude_patterns_options):
        return "", imports

    page_key = derive_page_key(operation.name)
    artifact = assemble_fragments(operation, page_key, config, renderer)
    logger.debug(
        "Emitted %d fragments for %s (page key %r)",
        len(artifact.fragments), operation.name, page_key,
    )
    return str(artifact), imports.add(*page_import_lines(config))


class PageGenerator:
    """Generates the page module for one document.

    Example:
        document = OperationDocument.from_path("./graphql")
        generator = PageGenerator(config, document)
        code = generator.generate_code()
    """

    def __init__(
        self,
        config: PageConfig,
        base: BaseDocument,
        hooks: HookRunner | None = None,
        template_dir: str | None = None,
    ):
        self.config = config
        self.base = base
        self.hooks = hooks_from_config(config, hooks)
        self.renderer = FragmentRenderer(template_dir) if template_dir else None

    def generate_operations(self) -> tuple[list[str], ImportSet]:
        """Emit every operation, returning the non-empty outputs and imports."""
        operations = self.hooks.run_pre_hooks(list(self.base.collected_operations()))
        imports = ImportSet()
        outputs = []
        for operation in operations:
            code, imports = emit_operation(self.config, operation, imports, self.renderer)
            if code:
                outputs.append(code)
        return outputs, imports

    def generate_code(self, filename: str = "pages.tsx") -> str:
        """Generate the complete module: imports, a blank line, then pages."""
        outputs, imports = self.generate_operations()
        return self.render_module(outputs, imports, filename)

    def render_module(
        self,
        outputs: list[str],
        imports: ImportSet,
        filename: str = "pages.tsx",
    ) -> str:
        """Join emitted pages with the collected imports and run post hooks."""
        import_lines = collect_imports(self.config, self.base, imports)

        sections = []
        if import_lines:
            sections.append("\n".join(import_lines))
        if outputs:
            sections.append("\n".join(outputs))
        content = "\n\n".join(sections)
        if content:
            content += "\n"
        return self.hooks.run_post_hooks(filename, content)
