"""
Boundary layer: adapters to the content store, sandbox registry,
sandbox databases, and progress store.
"""
