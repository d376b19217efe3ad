"""Domain layer — graph store, traversal, sampling and statistics.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
