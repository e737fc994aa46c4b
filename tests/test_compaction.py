from collections import Counter

from hypothesis import given, strategies as st

from arraykit.compaction import remove_duplicates, remove_element


def test_remove_duplicates_worked_example():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    k = remove_duplicates(nums)
    assert k == 5
    assert nums[:k] == [0, 1, 2, 3, 4]


def test_remove_element_worked_example():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    k = remove_element(nums, 2)
    assert k == 5
    assert nums[:k] == [0, 1, 3, 0, 4]


def test_empty_lists():
    assert remove_duplicates([]) == 0
    assert remove_element([], 1) == 0


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=40))
def test_remove_duplicates_invariants(nums):
    nums.sort()
    original = list(nums)
    k = remove_duplicates(nums)
    assert k == len(set(original))
    assert nums[:k] == sorted(set(original))
    assert nums[k:] == original[k:]
    assert len(nums) == len(original)


@given(
    st.lists(st.integers(min_value=0, max_value=5), max_size=40),
    st.integers(min_value=0, max_value=5),
)
def test_remove_element_invariants(nums, val):
    original = list(nums)
    k = remove_element(nums, val)
    assert k == len(original) - original.count(val)
    assert val not in nums[:k]
    expected = Counter(original)
    del expected[val]
    assert Counter(nums[:k]) == expected
    assert nums[k:] == original[k:]


@given(st.lists(st.integers(min_value=0, max_value=5), max_size=40))
def test_remove_absent_value_keeps_everything(nums):
    original = list(nums)
    assert remove_element(nums, 99) == len(original)
    assert nums == original