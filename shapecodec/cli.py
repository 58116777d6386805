import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from shapecodec.config import get_config
from shapecodec.exceptions import ShapecodecError
from shapecodec.loader import ServiceLoader
from shapecodec.resolver import resolve_shapes
from shapecodec.writer import ManifestWriter

console = Console()
app = typer.Typer(
    name='shapecodec',
    help='Resolve service definition shapes into codec descriptors',
    no_args_is_help=True,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format='%(levelname)s %(name)s: %(message)s'
    )


@app.command()
def resolve(
    source: Annotated[str, typer.Argument(help='Path or URL to a service definition')],
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='Write the JSON manifest to this file'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Resolve one service definition.

    Prints a summary table, or writes the descriptor manifest when --output
    is given.

    Examples:
        shapecodec resolve ./sqs-2012-11-05.normal.json
        shapecodec resolve ./sqs.json -o build/sqs.json
    """
    _configure_logging('DEBUG' if verbose else 'WARNING')

    try:
        definition = ServiceLoader().load(source)
        resolved = resolve_shapes(
            definition.shapes,
            input_shapes=definition.input_shapes,
            output_shapes=definition.output_shapes,
        )
        if output:
            path = ManifestWriter().write(resolved, output)
            console.print(
                f'[green]Successfully resolved {len(resolved)} shapes[/green] '
                f'into {path}'
            )
            return
    except ShapecodecError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    table = Table(title=source)
    table.add_column('Name')
    table.add_column('Type')
    table.add_column('Category')
    table.add_column('Decoder')
    for descriptor in resolved:
        table.add_row(
            descriptor.name,
            descriptor.type,
            descriptor.category or '',
            descriptor.decoder,
        )
    console.print(table)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
    ] = None,
) -> None:
    """Resolve every configured service and write its manifest.

    If no config file is specified, will look for shapecodec.yaml in the
    current directory or a [tool.shapecodec] table in pyproject.toml.

    Examples:
        shapecodec generate
        shapecodec generate --config my-config.yaml
    """
    try:
        settings = get_config(config)
        _configure_logging(settings.log_level)

        loader = ServiceLoader()
        writer = ManifestWriter()
        for service in settings.services:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Resolving shapes of {service.source}...', total=None
                )

                definition = loader.load(service.source)
                resolved = resolve_shapes(
                    definition.shapes,
                    input_shapes=definition.input_shapes,
                    output_shapes=definition.output_shapes,
                )
                path = writer.write(
                    resolved, f'{service.output}/{service.manifest_file}'
                )

                progress.update(task, description=f'Resolved {service.source}')
            console.print(f'[green]Successfully generated[/green] {path}')

    except ShapecodecError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of shapecodec."""
    from shapecodec import __version__

    console.print(f'shapecodec version: {__version__}')


if __name__ == '__main__':
    app()
