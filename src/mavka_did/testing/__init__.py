from __future__ import annotations

from .corpus import generate_corpus_files, generate_did_sources

__all__ = ["generate_corpus_files", "generate_did_sources"]
