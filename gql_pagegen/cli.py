"""Command-line interface for gql-pagegen."""

import logging
from pathlib import Path

import click

from . import __version__
from .core.config import PageConfig, load_config
from .core.documents import OperationDocument
from .core.emitter import PageGenerator
from .core.exceptions import PageGenError
from .core.filtering import should_exclude
from .core.naming import PageSymbols, derive_page_key


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_document(
    documents: str,
    config_path: str | None,
    overrides: dict,
) -> tuple[PageConfig, OperationDocument]:
    """Resolve the config and collect operations from `documents`."""
    config, document_config = load_config(config_path, overrides)
    document = OperationDocument.from_path(
        documents,
        document_config,
        types_namespace=config.import_operation_types_from,
    )
    return config, document


@click.group()
@click.version_option(__version__)
def main():
    """Next.js page helper generator for GraphQL operations.

    Generate getServerPage/withPage helpers for Apollo queries.
    """
    pass


@main.command()
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL operation document or a directory of .graphql/.gql files.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file for the generated code (default: stdout).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file with generation options.",
)
@click.option(
    "--apollo-version",
    type=click.Choice(["2", "3"]),
    help="Apollo client major version (default: 2).",
)
@click.option("--exclude", help="Skip operations whose name matches this pattern.")
@click.option("--exclude-flags", help="Flags for --exclude, e.g. 'i'.")
@click.option(
    "--types-namespace",
    help="Namespace prefixed to operation result and variables types.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in fragments.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    documents: str,
    output: str | None,
    config_path: str | None,
    apollo_version: str | None,
    exclude: str | None,
    exclude_flags: str | None,
    types_namespace: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate page helpers from GraphQL operations.

    Examples:

        gql-pagegen generate --documents ./graphql --output ./pages.tsx

        gql-pagegen generate -d ./graphql -c ./pagegen.yml --apollo-version 3

        gql-pagegen generate -d ./queries.graphql --exclude '^Internal'
    """
    configure_logging(verbose)
    overrides = {
        "apolloVersion": int(apollo_version) if apollo_version else None,
        "excludePatterns": exclude,
        "excludePatternsOptions": exclude_flags,
        "importOperationTypesFrom": types_namespace,
    }

    try:
        config, document = load_document(documents, config_path, overrides)
        operations = document.collected_operations()

        if output:
            click.echo(f"Generating pages for {len(operations)} operations...")
        if verbose:
            click.echo(f"  Apollo version: {config.apollo_version}", err=True)
            click.echo(f"  Exclude pattern: {config.exclude_patterns}", err=True)

        output_name = Path(output).name if output else "pages.tsx"
        generator = PageGenerator(config, document, template_dir=template_dir)
        outputs, imports = generator.generate_operations()
        code = generator.render_module(outputs, imports, output_name)
    except PageGenError as e:
        raise click.ClickException(str(e)) from e

    if not output:
        click.echo(code, nl=False)
        return

    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(code)

    click.echo(f"Done! Generated {len(outputs)} pages in {output_path}")


@main.command()
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL operation document or a directory of .graphql/.gql files.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML config file with generation options.",
)
@click.option("--exclude", help="Skip operations whose name matches this pattern.")
@click.option("--exclude-flags", help="Flags for --exclude, e.g. 'i'.")
def pages(
    documents: str,
    config_path: str | None,
    exclude: str | None,
    exclude_flags: str | None,
):
    """List operations with the page helpers they generate.

    Example:

        gql-pagegen pages -d ./graphql --exclude '^Internal'
    """
    configure_logging(False)
    overrides = {"excludePatterns": exclude, "excludePatternsOptions": exclude_flags}

    try:
        config, document = load_document(documents, config_path, overrides)
        for op in document.collected_operations():
            if should_exclude(op.name, config.exclude_patterns, config.exclude_patterns_options):
                click.echo(f"{op.name}: excluded")
                continue
            symbols = PageSymbols(derive_page_key(op.name))
            click.echo(
                f"{op.name}: {symbols.get_server_page}, {symbols.with_page}, "
                f"{symbols.component_type}, {symbols.ssr}"
            )
    except PageGenError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
