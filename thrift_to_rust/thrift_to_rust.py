import json
import logging

import click

from .pipeline import CodeGenerationError, CodeGeneratorConfig, PipelineGenerator


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Program name (defaults to the document name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation details to stderr")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
def thrift_to_rust(name, config, verbose, path, output):
    """Generate the Rust module for the Thrift program document PATH."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    try:
        codegen = PipelineGenerator.from_file(path, config, name=name)
        out = codegen.generate()
    except CodeGenerationError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(out, nl=False)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(out)
