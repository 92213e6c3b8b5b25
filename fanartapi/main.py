"""
Point d'entree CLI de fanartapi.

Interroge l'API fanart.tv depuis la ligne de commande :
    fanartapi images movie tt0137523
    fanartapi latest series
"""

import asyncio
from typing import Annotated, Iterable, Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fanartapi import __version__
from fanartapi.adapters.api import FanartClient
from fanartapi.config import Settings
from fanartapi.core.errors import FanartError
from fanartapi.core.models import Artwork, ImagesResult, LatestResult
from fanartapi.core.query_type import QueryType
from fanartapi.logging_config import configure_logging

app = typer.Typer(
    name="fanartapi",
    help="Client en ligne de commande pour l'API fanart.tv",
)
console = Console()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}

TYPE_HELP = "Type d'entite : movie, series, artist, album, label"


def _log_level(settings: Settings) -> str:
    """Niveau de log effectif selon -v/-q et la configuration."""
    if state["quiet"]:
        return "ERROR"
    if state["verbose"] >= 2:
        return "DEBUG"
    if state["verbose"] == 1:
        return "INFO"
    return settings.log_level


def _parse_type(value: str) -> QueryType:
    try:
        return QueryType.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _load_settings(api_key: Optional[str], client_key: Optional[str]) -> Settings:
    """Charge la configuration, les options CLI ayant priorite sur l'environnement."""
    try:
        settings = Settings()
    except ValidationError as e:
        console.print(f"[red]Configuration invalide:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    overrides = {}
    if api_key:
        overrides["api_key"] = api_key
    if client_key:
        overrides["client_key"] = client_key
    if overrides:
        settings = settings.model_copy(update=overrides)
    configure_logging(
        log_level=_log_level(settings),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    return settings


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """fanartapi - Images et mises a jour fanart.tv."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose


def _artwork_table(title: Optional[str], rows: Iterable[tuple[str, Artwork]]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Categorie", no_wrap=True)
    table.add_column("Images", justify="right", no_wrap=True)
    table.add_column("Premiere URL", overflow="fold")
    for category, assets in rows:
        if assets:
            table.add_row(category, str(len(assets)), assets[0].url)
    return table


def _render_images(result: ImagesResult) -> None:
    console.print(f'"{result.name}" ({result.canonical_id})')
    tables = [_artwork_table(None, result.categories())]
    for album_id, album in result.albums.items():
        tables.append(_artwork_table(f"Album {album_id}", album.items()))
    tables = [table for table in tables if table.row_count]
    if not tables:
        console.print("[dim]Aucune image.[/dim]")
    for table in tables:
        console.print(table)


def _render_latest(type: QueryType, entries: list[LatestResult]) -> None:
    if not entries:
        console.print(f"[yellow]Aucune mise a jour pour {type}.[/yellow]")
        return
    for entry in entries:
        console.print(
            f'{type} "{entry.name}" ({entry.canonical_id}) '
            f"+{entry.new_images}/{entry.total_images}"
        )


async def _images_async(settings: Settings, type: QueryType, id: str) -> ImagesResult:
    async with FanartClient.from_settings(settings) as client:
        return await client.images(type, id)


async def _latest_async(settings: Settings, type: QueryType) -> list[LatestResult]:
    async with FanartClient.from_settings(settings) as client:
        return await client.latest(type)


@app.command()
def images(
    type: Annotated[str, typer.Argument(help=TYPE_HELP)],
    id: Annotated[
        str, typer.Argument(help="Identifiant IMDb, TMDb, TheTVDB ou MusicBrainz")
    ],
    api_key: Annotated[
        Optional[str], typer.Option("--api-key", help="Cle API fanart.tv")
    ] = None,
    client_key: Annotated[
        Optional[str], typer.Option("--client-key", help="Cle client fanart.tv")
    ] = None,
) -> None:
    """Affiche les images d'une entite."""
    query_type = _parse_type(type)
    settings = _load_settings(api_key, client_key)
    try:
        result = asyncio.run(_images_async(settings, query_type, id))
    except (FanartError, httpx.HTTPError) as e:
        console.print(f"[red]Erreur:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    _render_images(result)


@app.command()
def latest(
    type: Annotated[str, typer.Argument(help=TYPE_HELP)],
    api_key: Annotated[
        Optional[str], typer.Option("--api-key", help="Cle API fanart.tv")
    ] = None,
    client_key: Annotated[
        Optional[str], typer.Option("--client-key", help="Cle client fanart.tv")
    ] = None,
) -> None:
    """Affiche les dernieres entites mises a jour."""
    query_type = _parse_type(type)
    settings = _load_settings(api_key, client_key)
    try:
        entries = asyncio.run(_latest_async(settings, query_type))
    except (FanartError, httpx.HTTPError) as e:
        console.print(f"[red]Erreur:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    _render_latest(query_type, entries)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"fanartapi v{__version__}")


if __name__ == "__main__":
    app()
