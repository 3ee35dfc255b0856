"""Risky-term rewriting for generated scripts."""

from script_sanitizer.rewriting.matcher import build_term_pattern, escape_term
from script_sanitizer.rewriting.rewriter import (
    TermHit,
    TermRewriter,
    filter_scripts,
    filter_text,
)
from script_sanitizer.rewriting.term_map import DEFAULT_TERM_MAP, TermMap

__all__ = [
    "build_term_pattern",
    "escape_term",
    "TermHit",
    "TermRewriter",
    "filter_scripts",
    "filter_text",
    "DEFAULT_TERM_MAP",
    "TermMap",
]
