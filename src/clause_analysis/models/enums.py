"""Enumerations for the clause analysis engine."""

from enum import Enum


class TokenTag(Enum):
    """Lexical class assigned to a token by the classifier."""
    NEG = "neg"
    MODAL = "modal"
    VERB = "verb"
    PREP = "prep"
    QUANT = "quant"
    GARBAGE = "garbage"
    OTHER = "other"


class SegmentType(Enum):
    """Segment kinds produced when compiling a clause to logic."""
    PHRASE = "phrase"
    RELATOR = "relator"


class TransformationCategory(Enum):
    """What a rewrite rule improves."""
    PRECISION = "precision"
    ENFORCEABILITY = "enforceability"
    RISK_REDUCTION = "risk-reduction"


class DiffType(Enum):
    """Types of word-level differences."""
    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"


class DocumentType(Enum):
    """Document types recognised by the keyword classifier."""
    NDA = "Non-Disclosure Agreement"
    SERVICE = "Service Agreement"
    LICENSE = "License Agreement"
    EMPLOYMENT = "Employment Agreement"
    PURCHASE = "Purchase Agreement"
    LEASE = "Lease Agreement"
    PARTNERSHIP = "Partnership Agreement"
    INDEMNIFICATION = "Indemnification Clause"
    TERMINATION = "Termination Clause"
    PAYMENT_TERMS = "Payment Terms"
    GOVERNING_LAW = "Governing Law Clause"
    GENERAL = "Contract/Agreement"
