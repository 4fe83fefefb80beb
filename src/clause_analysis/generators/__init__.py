"""Clause rewriting."""

from .rewrite_engine import RewriteEngine, match_case

__all__ = ["RewriteEngine", "match_case"]
