"""Shared word lists for the clause analysis engine.

Every membership test in the classifier, the logic compiler and the scorers
reads from the sets defined here. Entries are lowercase; multi-word entries
are matched as phrases against the lowercased clause text.
"""

from typing import FrozenSet


# Token classes used by the classifier
NEGATIONS: FrozenSet[str] = frozenset({
    "not", "never", "no", "none", "without", "neither", "nor", "cannot",
})

MODALS: FrozenSet[str] = frozenset({
    "shall", "must", "may", "can", "should", "will", "would", "could",
    "might", "ought",
})

BINDING_MODALS: FrozenSet[str] = frozenset({"shall", "must", "will"})

# Modal profile families; "have to" is matched as a phrase
OBLIGATION_MODALS: FrozenSet[str] = frozenset({"must", "shall", "have to"})
PERMISSION_MODALS: FrozenSet[str] = frozenset({"may", "can", "could"})
RECOMMENDATION_MODALS: FrozenSet[str] = frozenset({"should", "ought"})

VERBS: FrozenSet[str] = frozenset({
    # copular and auxiliary
    "is", "are", "was", "were", "be", "been", "being", "am",
    "has", "have", "had", "do", "does", "did",
    # legal action verbs
    "pay", "pays", "paid", "deliver", "delivers", "delivered",
    "provide", "provides", "provided", "perform", "performs",
    "agree", "agrees", "agreed", "indemnify", "indemnifies",
    "terminate", "terminates", "terminated", "notify", "notifies",
    "disclose", "discloses", "disclosed", "grant", "grants", "granted",
    "license", "licenses", "assign", "assigns", "assigned",
    "warrant", "warrants", "represent", "represents", "maintain", "maintains",
    "comply", "complies", "execute", "executes", "executed",
    "govern", "governs", "governed", "construe", "construed",
    "consider", "considers", "use", "uses", "keep", "keeps",
    "return", "returns", "reimburse", "reimburses", "waive", "waives",
    "cure", "cures", "renew", "renews", "purchase", "purchases",
    "sell", "sells", "lease", "leases", "employ", "employs",
    "hold", "holds", "protect", "protects", "remain", "remains",
})

PREPOSITIONS: FrozenSet[str] = frozenset({
    "of", "with", "by", "within", "under", "over", "into", "onto", "from",
    "to", "for", "in", "on", "at", "through", "between", "before", "after",
    "against", "toward", "towards", "inside", "outside", "beyond",
    "around", "upon", "during", "among", "throughout",
})

QUANTIFIERS: FrozenSet[str] = frozenset({
    "every", "all", "any", "some", "each", "both", "either",
})

DETERMINERS: FrozenSet[str] = frozenset({
    "the", "a", "an", "this", "that", "these", "those", "its", "their",
    "such",
})

CONJUNCTIONS: FrozenSet[str] = frozenset({"and", "or", "but"})

# Clarity
VAGUE_TERMS: FrozenSet[str] = frozenset({
    "reasonable", "reasonably", "appropriate", "adequate", "substantial",
    "approximately", "maybe", "perhaps", "possibly", "generally",
    "normally", "significant", "timely", "promptly", "something", "etc",
})

DEFINITION_MARKERS: FrozenSet[str] = frozenset({"means", "mean", "defined"})

# Enforceability
BINDING_TERMS: FrozenSet[str] = frozenset({
    "shall", "must", "will", "agree", "agrees", "covenant", "covenants",
    "undertake", "undertakes", "obligated",
})

CONSIDERATION_TERMS: FrozenSet[str] = frozenset({
    "consideration", "exchange", "payment", "payments", "pay", "pays",
    "paid", "compensation", "fee", "fees", "price", "sum", "royalty",
    "royalties", "rent", "salary",
})

PARTY_ROLES: FrozenSet[str] = frozenset({
    "party", "parties", "vendor", "client", "buyer", "seller", "licensor",
    "licensee", "employer", "employee", "contractor", "lessor", "lessee",
    "landlord", "tenant", "company", "customer", "supplier", "partner",
    "partners", "purchaser", "provider", "recipient", "discloser",
    "indemnitor", "indemnitee",
})

FORMALITY_TERMS: FrozenSet[str] = frozenset({
    "hereby", "whereas", "therefore", "pursuant", "notwithstanding",
    "hereinafter", "therein", "herein", "hereto", "hereunder",
    "aforementioned", "witnesseth",
})

# Risk
AMBIGUITY_MARKERS: FrozenSet[str] = frozenset({
    "reasonable", "reasonably", "appropriate", "adequate", "substantial",
    "approximately", "maybe", "perhaps", "possibly", "might", "generally",
    "normally", "significant", "timely", "promptly", "as needed",
    "if necessary", "from time to time", "where possible",
    "to the extent possible", "best efforts",
})

ONE_SIDED_TERMS: FrozenSet[str] = frozenset({
    "sole discretion", "absolute discretion", "unilateral", "unilaterally",
    "unlimited", "perpetual", "irrevocable", "waive", "waives", "forfeit",
    "forfeits",
})

ILLEGAL_TERMS: FrozenSet[str] = frozenset({
    "illegal", "unlawful", "penalty", "forfeiture", "no recourse",
    "unlimited liability", "indemnify all",
})

PROTECTIVE_TERMS: FrozenSet[str] = frozenset({
    "subject to", "provided that", "except", "unless", "limited to",
    "good faith", "to the extent permitted by law",
})

# Completeness checklist
COMPLETENESS_CHECKLIST = {
    "parties": PARTY_ROLES | {"between"},
    "obligation": BINDING_TERMS,
    "consideration_or_term": frozenset({
        "payment", "pay", "pays", "paid", "fee", "fees", "price",
        "consideration", "exchange", "value", "term", "duration", "period",
        "days", "months", "years", "commence", "commences", "effective",
        "expire", "expires",
    }),
    "termination": frozenset({
        "terminate", "terminated", "terminates", "termination", "cancel",
        "cancellation", "expiry", "expiration",
    }),
    "governing_law": frozenset({
        "governed", "governing", "jurisdiction", "law", "laws", "court",
        "courts", "venue", "arbitration",
    }),
}

CURRENCY_SYMBOLS: FrozenSet[str] = frozenset({"$", "€", "£", "¥"})
