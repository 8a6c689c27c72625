from __future__ import annotations

import numpy as np
import pytest


def _match_roots(actual, expected, atol):
    """Greedy nearest-neighbour pairing; roots carry no order."""
    remaining = list(np.asarray(expected, dtype=complex))
    actual = np.asarray(actual, dtype=complex)
    assert actual.size == len(remaining), f"expected {len(remaining)} roots, got {actual.size}"
    for root in actual:
        distances = [abs(root - e) for e in remaining]
        best = int(np.argmin(distances))
        assert distances[best] <= atol, f"root {root} has no match within {atol} in {remaining}"
        remaining.pop(best)


@pytest.fixture
def assert_same_roots():
    def check(actual, expected, atol=1e-9):
        _match_roots(actual, expected, atol)

    return check
