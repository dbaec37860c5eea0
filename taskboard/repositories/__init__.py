"""
Persistence adapters.

Two interchangeable stores implement the same EntityStore contract: a JSON
file mirrored in memory (LocalStore) and a SQL database (RemoteStore).
Services depend on the contract and never on a concrete backend.
"""
