# cli/main.py
import click
from .commands.server import serve
from .commands.catalog import sample

@click.group()
def cli():
    """Library catalog CLI"""
    pass

cli.add_command(serve)
cli.add_command(sample)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
