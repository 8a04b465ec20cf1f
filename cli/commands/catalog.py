import json
import click
from core.catalog import CatalogStore, seed_sample_data

KINDS = {
    'authors': 'list_authors',
    'genres': 'list_genres',
    'books': 'list_books',
    'book-copies': 'list_copies',
}

@click.command()
@click.option('--kind', type=click.Choice(list(KINDS)), default=None,
              help='Only print one kind of record')
def sample(kind: str):
    """Print the sample catalog as JSON"""
    store = CatalogStore()
    seed_sample_data(store)

    kinds = [kind] if kind else list(KINDS)
    output = {}
    for name in kinds:
        result = getattr(store, KINDS[name])()
        output[name] = [record.to_dict() for record in result.value]

    click.echo(json.dumps(output if not kind else output[kind], indent=2))
