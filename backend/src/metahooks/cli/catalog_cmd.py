"""Catalog CLI commands — list and show lifecycle hook types."""

import click

from metahooks.hooks.catalog import HOOK_TYPES, get_descriptor
from metahooks.hooks.types import HookDescriptor


def _flags(descriptor: HookDescriptor) -> str:
    flags = []
    if descriptor.synchronous:
        flags.append("sync")
    if descriptor.host_restricted:
        flags.append("global-only")
    return ",".join(flags) or "-"


@click.group()
def catalog():
    """Lifecycle hook catalog commands."""
    pass


@catalog.command("list")
def list_types():
    """List every known hook type."""
    width = max(len(name) for name in HOOK_TYPES)
    click.echo(f"{'HOOK TYPE':<{width}}  ARGS  FLAGS        ALIASES")
    for name, descriptor in HOOK_TYPES.items():
        aliases = ", ".join(descriptor.alias_of) or "-"
        click.echo(
            f"{name:<{width}}  {descriptor.arity:>4}  {_flags(descriptor):<11}  {aliases}"
        )
    click.echo(f"\n{len(HOOK_TYPES)} hook type(s)")


@catalog.command()
@click.argument("hook_type")
def show(hook_type: str):
    """Show the descriptor for HOOK_TYPE."""
    descriptor = get_descriptor(hook_type)
    if descriptor is None:
        click.echo(
            f"Unknown hook type '{hook_type}'. Unknown types still work: "
            "they run asynchronously, unrestricted, without aliases.",
            err=True,
        )
        raise SystemExit(1)

    click.echo(f"Hook type:    {descriptor.name}")
    click.echo(f"Arguments:    {descriptor.arity}")
    click.echo(f"Synchronous:  {'yes' if descriptor.synchronous else 'no'}")
    click.echo(f"Global only:  {'yes' if descriptor.host_restricted else 'no'}")
    click.echo(f"Aliases:      {', '.join(descriptor.alias_of) or '-'}")
