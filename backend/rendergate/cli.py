"""rendergate — command-line entry point for the renderer contract and taste gates."""

import sys
from typing import Optional

import click
import uvicorn

from rendergate import __version__
from rendergate.config import get_settings
from rendergate.errors import GateSetupError
from rendergate.logging_config import configure_logging
from rendergate.stages import run_renderer_validate, run_taste

PATH = click.Path(dir_okay=False)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    rendergate - Build-time compliance gates for UI renderer outputs.

    Every decision is made from declared metadata; nothing is rendered.
    """
    configure_logging(get_settings())


@cli.command("renderer-validate")
@click.option("--manifest", type=PATH, default=None, help="Renderer output manifest (JSON).")
@click.option("--registry", type=PATH, default=None, help="Renderer registry (JSON).")
@click.option("--report", type=PATH, default=None, help="Where to write the validation report.")
@click.option("--contract-schema", type=PATH, default=None, help="JSON Schema for the manifest.")
@click.option("--registry-schema", type=PATH, default=None, help="JSON Schema for the registry.")
def renderer_validate(
    manifest: Optional[str],
    registry: Optional[str],
    report: Optional[str],
    contract_schema: Optional[str],
    registry_schema: Optional[str],
):
    """Check a renderer manifest against the renderer contract and registry."""
    try:
        result, report_path = run_renderer_validate(
            manifest=manifest,
            registry=registry,
            report=report,
            contract_schema=contract_schema,
            registry_schema=registry_schema,
        )
    except GateSetupError as e:
        raise click.ClickException(str(e)) from e

    if result.status == "failed":
        click.echo(f"Renderer validation failed. See {report_path}", err=True)
        sys.exit(1)
    click.echo(f"Renderer validation passed. Report written to {report_path}")


@cli.command("taste")
@click.option("--manifest", type=PATH, default=None, help="Renderer output manifest (JSON).")
@click.option("--constitution", type=PATH, default=None, help="Visual constitution (JSON).")
@click.option("--intent", type=PATH, default=None, help="Design intent (JSON).")
@click.option("--report", type=PATH, default=None, help="Where to write the taste report.")
@click.option("--ruleset", type=PATH, default=None, help="Taste ruleset with rule metadata (JSON).")
@click.option(
    "--fail-fast/--no-fail-fast",
    default=lambda: get_settings().TASTE_FAIL_FAST,
    help="Stop at the first failing rule (default from RENDERGATE_TASTE_FAIL_FAST).",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Run every rule even after failures (also enabled by RENDERGATE_TASTE_VERBOSE).",
)
def taste(
    manifest: Optional[str],
    constitution: Optional[str],
    intent: Optional[str],
    report: Optional[str],
    ruleset: Optional[str],
    fail_fast: bool,
    verbose: bool,
):
    """Evaluate the manifest's taste declarations against the visual constitution."""
    try:
        result, report_path = run_taste(
            manifest=manifest,
            constitution=constitution,
            intent=intent,
            report=report,
            ruleset=ruleset,
            fail_fast=fail_fast,
            verbose=verbose or get_settings().TASTE_VERBOSE,
        )
    except GateSetupError as e:
        raise click.ClickException(str(e)) from e

    if result.status == "failed":
        first = result.errors[0]
        click.echo(
            f"Taste validation failed ({first.id}): {first.message} "
            f"| clause={first.clause} intent={first.intent_reference}",
            err=True,
        )
        click.echo(f"See {report_path}", err=True)
        sys.exit(1)
    click.echo(f"Taste validation passed. Report written to {report_path}")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from RENDERGATE_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (default from RENDERGATE_PORT).")
def serve(host: Optional[str], port: Optional[int]):
    """Serve the gates over HTTP."""
    settings = get_settings()
    uvicorn.run(
        "rendergate.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


def main():
    cli()


if __name__ == "__main__":
    main()
