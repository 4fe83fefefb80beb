"""Logic compilation for clause analysis."""

from .compiler import LogicCompiler, phrase_to_entity, segment_tokens, tone_summary

__all__ = ["LogicCompiler", "phrase_to_entity", "segment_tokens", "tone_summary"]
