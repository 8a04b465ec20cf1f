import os
import click
from core.config import configure_logging, settings

@click.command()
@click.option('--host', default=settings.host, show_default=True, help='Interface to bind')
@click.option('--port', default=settings.port, type=int, show_default=True, help='Port to listen on')
@click.option('--sample-data/--no-sample-data', default=settings.sample_data,
              help='Seed the catalog with sample authors, genres, books and copies')
@click.option('--reload', is_flag=True, help='Reload on source changes (development)')
def serve(host: str, port: int, sample_data: bool, reload: bool):
    """Run the catalog API"""
    import uvicorn

    configure_logging()
    # api.main builds the app on import, possibly in a reloader subprocess
    os.environ["CATALOG_SAMPLE_DATA"] = "true" if sample_data else "false"
    settings.sample_data = sample_data
    click.echo(click.style("Library Management API on ", fg='blue') +
               click.style(f"http://{host}:{port}", fg='cyan'))
    click.echo(click.style("API documentation at ", fg='blue') +
               click.style(f"http://{host}:{port}/api-docs", fg='cyan'))
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["api", "core"] if reload else None
    )
