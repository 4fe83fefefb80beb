"""Word-level diff between an original clause and its rewrite."""

from typing import List, Sequence, Tuple

from ..interfaces.rewriter import IDiffEngine
from ..models.enums import DiffType
from ..models.rewrite import DiffResult, DiffSpan


def lcs_table(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    """
    Suffix longest-common-subsequence table.

    ``table[i][j]`` is the LCS length of ``a[i:]`` and ``b[j:]``. The full
    (m+1) x (n+1) table is kept because the forward walk reads it; time
    and space are both O(m*n).
    """
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(n - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


class DiffEngine(IDiffEngine):
    """
    LCS-based word diff.

    Where the texts diverge, deletions are emitted before insertions.
    Adjacent words of the same diff type are merged into one span.
    """

    def diff(self, original: str, rewritten: str) -> DiffResult:
        a = original.split()
        b = rewritten.split()
        table = lcs_table(a, b)

        steps: List[Tuple[DiffType, str]] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] == b[j]:
                steps.append((DiffType.EQUAL, a[i]))
                i += 1
                j += 1
            elif table[i + 1][j] >= table[i][j + 1]:
                steps.append((DiffType.DELETE, a[i]))
                i += 1
            else:
                steps.append((DiffType.INSERT, b[j]))
                j += 1
        steps.extend((DiffType.DELETE, word) for word in a[i:])
        steps.extend((DiffType.INSERT, word) for word in b[j:])

        return DiffResult(spans=self._merge(steps))

    @staticmethod
    def _merge(steps: List[Tuple[DiffType, str]]) -> Tuple[DiffSpan, ...]:
        spans: List[DiffSpan] = []
        current_type = None
        words: List[str] = []
        for diff_type, word in steps:
            if diff_type != current_type and words:
                spans.append(DiffSpan(tuple(words), current_type))
                words = []
            current_type = diff_type
            words.append(word)
        if words:
            spans.append(DiffSpan(tuple(words), current_type))
        return tuple(spans)
