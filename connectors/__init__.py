"""
connectors — clients for external services.

Currently only the read-only PokéAPI client (``connectors.pokeapi``).
"""
