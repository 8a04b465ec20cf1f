# core/catalog/ids.py
import uuid

ID_LENGTH = 12


def generate_id() -> str:
    """Return a short random identifier for a new catalog row.

    Identifiers are not checked against existing rows and are not sequential.
    """
    return uuid.uuid4().hex[:ID_LENGTH]
