from __future__ import annotations

from .corpus import (
    encode_mappings,
    generate_corpus_files,
    generate_sources,
    generate_stack_traces,
    identity_source_map,
    write_corpus,
)

__all__ = [
    "encode_mappings",
    "generate_corpus_files",
    "generate_sources",
    "generate_stack_traces",
    "identity_source_map",
    "write_corpus",
]
