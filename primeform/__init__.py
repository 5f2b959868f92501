"""PrimeForm backend package.

Holds the domain entities, use cases, infrastructure adapters and HTTP
interfaces of the fitness tracking API.
"""
