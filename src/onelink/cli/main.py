"""Main CLI entry point for onelink.

Encodes profile files into share links and decodes links back into
profiles from the command line.
"""

import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from onelink import __version__
from onelink.codec.profile_codec import ProfileCodec
from onelink.config import CodecSettings
from onelink.errors import ParseError, SerializationError, ShapeError, TransformError
from onelink.profiles.base import Profile
from onelink.profiles.loader import ProfileLoader, load_profile
from onelink.transforms.registry import get_global_transform_registry
from onelink.utils.helpers import build_share_url, extract_token

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _build_codec(settings: CodecSettings, transform: str | None) -> ProfileCodec:
    if transform:
        settings = settings.model_copy(update={"transform": transform})
    return ProfileCodec.from_settings(settings)


@click.group()
@click.version_option(version=__version__, prog_name="onelink")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """onelink - Share a profile through a URL.

    Profiles are encoded into compact URL-safe tokens. The link is the
    storage; nothing is kept on a server.
    """
    settings = CodecSettings()
    _setup_logging("DEBUG" if verbose else settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--transform", "-t", help="URL transform to use (see list-transforms)")
@click.option("--base-url", "-b", help="Print a full share URL on this page instead of the token")
@click.option("--param", help="Query parameter for the token in the share URL (fragment if unset)")
@click.pass_context
def encode(
    ctx: click.Context,
    profile_path: str,
    transform: str | None,
    base_url: str | None,
    param: str | None,
) -> None:
    """Encode a profile file into a share token.

    PROFILE_PATH is a YAML or JSON profile file.
    """
    verbose = ctx.obj.get("verbose", False)
    settings = ctx.obj["settings"]

    try:
        profile = load_profile(profile_path)
        codec = _build_codec(settings, transform)
    except (ParseError, ShapeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    result = codec.try_encode(profile)
    if not result.ok:
        console.print(f"[red]{SerializationError.user_message}[/red]")
        if verbose:
            console.print(f"[dim]{result.error}[/dim]")
        sys.exit(1)

    if base_url:
        click.echo(build_share_url(base_url, result.token, param or settings.share_param))
    else:
        click.echo(result.token)


@cli.command()
@click.argument("token")
@click.option("--transform", "-t", help="URL transform the token was made with")
@click.option("--param", help="Query parameter holding the token when TOKEN is a URL")
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "yaml", "table"]), default="json", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write the profile to a YAML file")
@click.pass_context
def decode(
    ctx: click.Context,
    token: str,
    transform: str | None,
    param: str | None,
    output_format: str,
    output: str | None,
) -> None:
    """Decode a share token or share URL into a profile.

    TOKEN is a bare token or a URL carrying one.
    """
    verbose = ctx.obj.get("verbose", False)
    settings = ctx.obj["settings"]

    try:
        codec = _build_codec(settings, transform)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    result = codec.try_decode(extract_token(token, param or settings.share_param))
    if not result.ok:
        console.print(f"[red]{TransformError.user_message}[/red]")
        if verbose:
            console.print(f"[dim]{result.error}[/dim]")
        sys.exit(1)

    profile = result.profile
    if output:
        ProfileLoader().save_file(profile, output)
        console.print(f"[green]Wrote profile to {output}[/green]")
        return

    if output_format == "table":
        _print_profile(profile)
    elif output_format == "yaml":
        click.echo(yaml.dump(profile.to_data(), sort_keys=False, allow_unicode=True), nl=False)
    else:
        click.echo(json.dumps(profile.to_data(), indent=2, ensure_ascii=False))


@cli.command()
@click.option("--name", "-n", required=True, help="Display name")
@click.option("--output", "-o", type=click.Path(), default="profile.yaml", help="Output file path")
@click.option("--bio", help="Short biography")
@click.option("--link", "links", multiple=True, nargs=2, metavar="TITLE URL", help="Social link, repeatable")
@click.pass_context
def init_profile(
    ctx: click.Context,
    name: str,
    output: str,
    bio: str | None,
    links: tuple[tuple[str, str], ...],
) -> None:
    """Initialize a new profile file.

    Creates a template profile YAML file.
    """
    from onelink.profiles.base import ProfileBuilder

    builder = ProfileBuilder(name).bio(bio if bio is not None else f"Hi, I'm {name}")
    for title, url in links or [("Website", "https://example.com")]:
        builder.link(title, url)

    ProfileLoader().save_file(builder.build(), output)

    console.print(f"[green]Created profile: {output}[/green]")


@cli.command()
@click.pass_context
def list_transforms(ctx: click.Context) -> None:
    """List available URL transforms."""
    registry = get_global_transform_registry()
    default = ctx.obj["settings"].transform

    table = Table(title="Available Transforms")
    table.add_column("Name", style="cyan")
    table.add_column("Default")
    table.add_column("Description")

    for name in registry.list_names():
        transform_class = registry.get(name)
        table.add_row(
            name,
            "[green]Yes[/green]" if name == default else "",
            transform_class.description or "-",
        )

    console.print(table)


def _show(value: str | None) -> str:
    return "-" if value is None else escape(value)


def _print_profile(profile: Profile) -> None:
    """Print a decoded profile."""
    if profile.is_empty():
        console.print("[yellow]Profile is empty[/yellow]")
        return

    console.print(Panel.fit(
        f"Name: [cyan]{_show(profile.name)}[/cyan]\n"
        f"Bio: {_show(profile.bio)}\n"
        f"Avatar: {_show(profile.avatar_url)}",
        title="Profile",
    ))

    if not profile.links:
        console.print("[yellow]No links[/yellow]")
        return

    table = Table(title="Links")
    table.add_column("#", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("URL")

    for index, link in enumerate(profile.links, start=1):
        table.add_row(str(index), escape(link.title), escape(link.url))

    console.print(table)


if __name__ == "__main__":
    cli()
