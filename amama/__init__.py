"""
Backend for the Amama EC savings group.

A FastAPI service that keeps the whole group state (members, balances,
minutes, transactions, decisions) in one JSON file and serves the static
frontend next to it.
"""
