"""Generation hooks for customizing page generation.

A pre hook receives the collected operations before emission and returns
the operations to emit. A post hook receives the name and content of the
generated file and returns the content to write.

Example usage:
    from gql_pagegen.core.hooks import BannerHook, ExcludeOperationsHook

    runner = HookRunner()
    runner.add_pre_hook(ExcludeOperationsHook("^Admin"))
    runner.add_post_hook(BannerHook(header="/* eslint-disable */"))
"""

from typing import Protocol, runtime_checkable

from .config import PageConfig
from .filtering import should_exclude
from .ir import OperationDescriptor


@runtime_checkable
class PreGenerateHook(Protocol):
    """Selects or reorders operations before any page code is emitted.

    Example:
        class QueriesOnly:
            def pre_generate(self, operations):
                return [op for op in operations if op.operation_type == "query"]
    """

    def pre_generate(
        self, operations: list[OperationDescriptor]
    ) -> list[OperationDescriptor]:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Rewrites the generated module text, e.g. to add a license banner."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class BannerHook:
    """Wraps generated content between a header and a footer.

    Each non-empty banner is separated from the content by one blank line.
    """

    def __init__(self, header: str = "", footer: str = ""):
        self.header = header
        self.footer = footer

    def post_generate(self, _filename: str, content: str) -> str:
        if self.header:
            content = self.header.rstrip("\n") + "\n\n" + content
        if self.footer:
            content = content.rstrip("\n") + "\n\n" + self.footer
        return content


class ExcludeOperationsHook:
    """Drops operations whose name matches a pattern.

    Matching goes through should_exclude, so the pattern and flags behave
    exactly like the excludePatterns option.
    """

    def __init__(self, pattern: str, flags: str = ""):
        self.pattern = pattern
        self.flags = flags

    def pre_generate(
        self, operations: list[OperationDescriptor]
    ) -> list[OperationDescriptor]:
        return [
            op for op in operations
            if not should_exclude(op.name, self.pattern, self.flags)
        ]


class HookRunner:
    """Applies pre and post hooks in registration order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def extend(self, other: "HookRunner"):
        """Append the hooks of `other` after this runner's own."""
        self.pre_hooks.extend(other.pre_hooks)
        self.post_hooks.extend(other.post_hooks)

    def run_pre_hooks(
        self, operations: list[OperationDescriptor]
    ) -> list[OperationDescriptor]:
        for hook in self.pre_hooks:
            operations = hook.pre_generate(operations)
        return operations

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content


def hooks_from_config(
    config: PageConfig, extra: HookRunner | None = None
) -> HookRunner:
    """Build a runner for the config's `pre`/`post` text plus `extra` hooks.

    The banner runs last so it stays outermost in the written file.
    """
    runner = HookRunner()
    if extra:
        runner.extend(extra)
    if config.pre or config.post:
        runner.add_post_hook(BannerHook(header=config.pre, footer=config.post))
    return runner
