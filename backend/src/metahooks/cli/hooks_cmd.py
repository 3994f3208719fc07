"""Hook file CLI commands — check a YAML hook file."""

from pathlib import Path

import click

from metahooks.hooks.catalog import get_descriptor
from metahooks.hooks.errors import HookConfigError
from metahooks.hooks.loader import load_hook_specs, resolve_callable


@click.group()
def hooks():
    """Hook file commands."""
    pass


@hooks.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat hook types missing from the catalog as errors.",
)
@click.pass_obj
def check(config, path: Path | None, strict: bool):
    """Check that every hook in PATH resolves to a callable."""
    if path is None:
        path = config.hooks_file if config else None
    if path is None:
        click.echo("Error: no hook file given and METAHOOKS_HOOKS_FILE is not set.", err=True)
        raise SystemExit(1)

    try:
        specs = load_hook_specs(path)
    except HookConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    errors = 0
    warnings = 0
    for spec in specs:
        label = f"{spec.hook_type}: {spec.target}"
        if spec.name:
            label += f" (name={spec.name})"

        try:
            resolve_callable(spec.target)
        except HookConfigError as e:
            click.echo(click.style(f"  ✗ {label}: {e}", fg="red"))
            errors += 1
            continue

        if get_descriptor(spec.hook_type) is None:
            click.echo(click.style(f"  ! {label}: hook type not in catalog", fg="yellow"))
            if strict:
                errors += 1
            else:
                warnings += 1
            continue

        click.echo(f"  ✓ {label}")

    click.echo(f"\n{len(specs)} hook(s), {errors} error(s), {warnings} warning(s)")
    if errors:
        raise SystemExit(1)
