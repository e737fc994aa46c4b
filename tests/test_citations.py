from hypothesis import given, strategies as st

from arraykit.citations import h_index


def test_worked_example():
    assert h_index([3, 0, 6, 1, 5]) == 3


def test_empty():
    assert h_index([]) == 0


def test_input_not_mutated():
    citations = [3, 0, 6, 1, 5]
    h_index(citations)
    assert citations == [3, 0, 6, 1, 5]


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=40))
def test_definition_holds(citations):
    h = h_index(citations)
    assert 0 <= h <= len(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1


@given(st.integers(min_value=1, max_value=30), st.integers(min_value=0, max_value=20))
def test_all_highly_cited_gives_count(n, extra):
    assert h_index([n + extra] * n) == n