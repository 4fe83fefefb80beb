"""HTTP interface for the clause analysis engine."""
