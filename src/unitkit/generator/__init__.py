"""Code generator expanding unit family definitions into quantity modules."""

from .codegen import (
    GenerationResult,
    QuantityTypeGenerator,
    SchemaSource,
    generate,
    stale_files,
    write_output,
)

__all__ = [
    "GenerationResult",
    "QuantityTypeGenerator",
    "SchemaSource",
    "generate",
    "stale_files",
    "write_output",
]
