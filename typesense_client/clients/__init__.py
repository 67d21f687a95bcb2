"""Typesense client facade."""

from typesense_client.clients.typesense_client import TypesenseClient, new_client

__all__ = ["TypesenseClient", "new_client"]
