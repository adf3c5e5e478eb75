"""Infrastructure layer — on-disk formats and the config store.

This layer depends on the domain models and stdlib file I/O.
It must never import from services, commands, or output.
"""
