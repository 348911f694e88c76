"""Tests for generation hooks."""

import pytest

from gql_pagegen.core.config import resolve_config
from gql_pagegen.core.exceptions import InvalidPatternError
from gql_pagegen.core.hooks import (
    BannerHook,
    ExcludeOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
    hooks_from_config,
)


@pytest.fixture
def operations(make_operation):
    """A sample set of collected operations."""
    return [
        make_operation("UserPage"),
        make_operation("DebugPage"),
        make_operation("OrdersPage"),
        make_operation("CreateOrder", "mutation"),
    ]


def names(operations):
    return [op.name for op in operations]


class TestBannerHook:
    """Tests for BannerHook."""

    def test_header(self):
        hook = BannerHook(header="// Auto-generated")
        assert hook.post_generate("pages.tsx", "code\n") == "// Auto-generated\n\ncode\n"

    def test_header_with_newline(self):
        hook = BannerHook(header="// Header\n")
        # Should not double-up newlines
        assert hook.post_generate("pages.tsx", "code") == "// Header\n\ncode"

    def test_footer(self):
        hook = BannerHook(footer="// end")
        assert hook.post_generate("pages.tsx", "code\n") == "code\n\n// end"
        assert hook.post_generate("pages.tsx", "code") == "code\n\n// end"

    def test_header_and_footer(self):
        hook = BannerHook(header="// top", footer="// bottom")
        assert hook.post_generate("pages.tsx", "code\n") == "// top\n\ncode\n\n// bottom"

    def test_empty_banner_is_noop(self):
        assert BannerHook().post_generate("pages.tsx", "code\n") == "code\n"


class TestExcludeOperationsHook:
    """Tests for ExcludeOperationsHook."""

    def test_drops_matching(self, operations):
        hook = ExcludeOperationsHook("^Debug")
        assert names(hook.pre_generate(operations)) == ["UserPage", "OrdersPage", "CreateOrder"]

    def test_flags_match_exclude_option(self, operations):
        hook = ExcludeOperationsHook("page$", "i")
        assert names(hook.pre_generate(operations)) == ["CreateOrder"]

    def test_invalid_pattern(self, operations):
        with pytest.raises(InvalidPatternError):
            ExcludeOperationsHook("(").pre_generate(operations)


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_pre_hooks_in_order(self, operations):
        class QueriesOnly:
            def pre_generate(self, operations):
                return [op for op in operations if op.operation_type == "query"]

        runner = HookRunner()
        runner.add_pre_hook(ExcludeOperationsHook("^Debug"))
        runner.add_pre_hook(QueriesOnly())
        assert names(runner.run_pre_hooks(operations)) == ["UserPage", "OrdersPage"]

    def test_runs_post_hooks_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(BannerHook(header="// Line 1"))
        runner.add_post_hook(BannerHook(header="// Line 0"))
        result = runner.run_post_hooks("pages.tsx", "code")
        assert result.index("// Line 0") < result.index("// Line 1")

    def test_extend(self, operations):
        first = HookRunner()
        second = HookRunner()
        second.add_pre_hook(ExcludeOperationsHook("^Debug"))
        second.add_post_hook(BannerHook(footer="// end"))
        first.extend(second)
        assert names(first.run_pre_hooks(operations)) == ["UserPage", "OrdersPage", "CreateOrder"]
        assert first.run_post_hooks("pages.tsx", "code") == "code\n\n// end"


class TestHooksFromConfig:
    """Tests for hooks_from_config."""

    def test_no_text_no_hooks(self):
        runner = hooks_from_config(resolve_config({}))
        assert runner.pre_hooks == []
        assert runner.post_hooks == []

    def test_pre_and_post(self):
        runner = hooks_from_config(resolve_config({"pre": "// top", "post": "// bottom"}))
        assert runner.run_post_hooks("pages.tsx", "code\n") == "// top\n\ncode\n\n// bottom"

    def test_extra_hooks_keep_banner_outermost(self, operations):
        extra = HookRunner()
        extra.add_pre_hook(ExcludeOperationsHook("^Debug"))
        extra.add_post_hook(BannerHook(header="// license"))
        runner = hooks_from_config(resolve_config({"pre": "// top", "post": "// bottom"}), extra)

        assert "DebugPage" not in names(runner.run_pre_hooks(operations))
        assert runner.run_post_hooks("pages.tsx", "code\n") == (
            "// top\n\n// license\n\ncode\n\n// bottom"
        )


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_banner_is_post_hook(self):
        assert isinstance(BannerHook(), PostGenerateHook)

    def test_exclude_is_pre_hook(self):
        assert isinstance(ExcludeOperationsHook("x"), PreGenerateHook)

    def test_custom_pre_hook(self):
        class CustomPreHook:
            def pre_generate(self, operations):
                return operations

        assert isinstance(CustomPreHook(), PreGenerateHook)
