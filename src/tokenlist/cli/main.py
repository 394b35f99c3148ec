"""
BEP2 token list updater - command line entry point
"""
import asyncio
import os
import sys
from pathlib import Path

import aiohttp
import click
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.table import Table

from tokenlist import __version__
from tokenlist.data.config import ConfigManager
from tokenlist.data.errors import TokenListError
from tokenlist.data.pipelines.reconcile import MergeAction
from tokenlist.data.pipelines.updater import TokenListUpdater
from tokenlist.data.registry import DataRegistry

console = Console()


def setup_logging(debug: bool = False, log_dir: str | None = None):
    logger.remove()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if debug or os.getenv("DEBUG", "false").lower() == "true":
        log_level = "DEBUG"
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True
    )
    if log_dir:
        path = Path(log_dir); path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "tokenlist_{time:YYYY-MM-DD}.log",
            rotation="1 day",
            retention="30 days",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG"
        )


def load_settings(ctx, **overrides):
    settings = ConfigManager(ctx.obj.get('config')).settings
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


@click.group()
@click.option('--config', '-c', help='Path to configuration file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--log-dir', default=None, help='Also write daily rotated logs here')
@click.pass_context
def cli(ctx, config, debug, log_dir):
    """BEP2 token list updater"""
    load_dotenv()
    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['debug'] = debug
    setup_logging(debug, log_dir or os.getenv("LOG_DIR"))


@cli.command()
@click.option('--assets-root', type=click.Path(file_okay=False), default=None, help='Root of the assets repository')
@click.option('--bootstrap-missing', is_flag=True, help='Write version 1 when the previous list is missing or corrupt')
@click.option('--skip-bootstrap', is_flag=True, help='Do not create logos/info.json for new explorer assets')
@click.pass_context
def update(ctx, assets_root, bootstrap_missing, skip_bootstrap):
    """Rebuild tokenlist.json from live DEX markets"""
    settings = load_settings(ctx, assets_root=assets_root, bootstrap_missing=bootstrap_missing or None)
    updater = TokenListUpdater(settings, bootstrap_assets=not skip_bootstrap)
    try:
        decision = asyncio.run(updater.run())
    except (TokenListError, aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        # ValueError also covers pydantic ValidationError and undecodable JSON bodies
        reason = str(e) or type(e).__name__
        logger.error(f"Token list update failed: {reason}")
        console.print(f"[red]Update failed: {reason}[/red]")
        sys.exit(1)

    if decision.action is MergeAction.WRITE:
        console.print(f"[green]Published version {decision.document.version.major} "
                      f"with {len(decision.document.tokens)} tokens[/green]")
    else:
        console.print(f"[yellow]No changes: {decision.reason}[/yellow]")


@cli.command()
@click.pass_context
def status(ctx):
    """Show upstream source health"""
    settings = load_settings(ctx)
    registry = DataRegistry(settings)

    async def run_status():
        return [(src.name, await src.health()) for src in registry.sources]

    table = Table(title="Source Health Check")
    table.add_column("Source", style="cyan")
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    healthy = True
    for name, health in asyncio.run(run_status()):
        if health.get("ok"):
            table.add_row(name, "[green]OK[/green]", "")
        else:
            healthy = False
            table.add_row(name, "[red]DOWN[/red]", health.get("error", ""))
    console.print(table)
    if not healthy:
        sys.exit(1)


@cli.command()
def version():
    """Show version information"""
    console.print(f"[bold blue]BEP2 token list updater[/bold blue] {__version__}")


def main():
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
