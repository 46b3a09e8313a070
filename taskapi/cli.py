import logging

import click
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .api import create_app
from .config import config

console = Console()


@click.group()
def cli():
    """Task API - in-memory task service"""
    pass


@cli.command()
@click.option('--host', default=config.HOST, show_default=True, help='Interface to bind')
@click.option('--port', default=config.PORT, show_default=True, type=int, help='Port to listen on')
@click.option('--debug/--no-debug', default=config.DEBUG, help='Run Flask in debug mode')
def serve(host: str, port: int, debug: bool):
    """Run the HTTP server"""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app()

    console.print(Panel(
        f"[bold cyan]Task API[/bold cyan] listening on [green]http://{host}:{port}/api/tasks/[/green]\n"
        f"OpenAPI: {'/api/openapi.json' if config.ENABLE_DOCS else '[dim]disabled[/dim]'}",
        box=box.ROUNDED,
    ))
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


@cli.command()
def routes():
    """List the registered HTTP routes"""
    app = create_app()

    table = Table(title="Routes", box=box.ROUNDED)
    table.add_column("Methods", style="cyan", no_wrap=True)
    table.add_column("Path", style="green")
    table.add_column("Endpoint", style="magenta")

    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.endpoint == 'static':
            continue
        methods = ', '.join(sorted(rule.methods - {'HEAD', 'OPTIONS'}))
        table.add_row(methods, rule.rule, rule.endpoint)

    console.print(table)
