from . import (
    canon,
    types,
    config,
    exceptions,
    ordering,
    assemble,
    aggregate,
    window,
    validate,
    ingest,
    formats,
    provider,
)

__all__ = [
    "canon",
    "types",
    "config",
    "exceptions",
    "ordering",
    "assemble",
    "aggregate",
    "window",
    "validate",
    "ingest",
    "formats",
    "provider",
]
