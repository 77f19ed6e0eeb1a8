import pytest

from demokit.leetcode import (
    is_palindrome,
    is_valid,
    longest_common_prefix,
    remove_duplicates,
    remove_element,
    reverse,
    roman_to_int,
    str_str,
    two_sum,
)


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    result = two_sum(nums, 9)
    assert len(result) == 2
    later, earlier = result
    assert later > earlier
    assert nums[later] + nums[earlier] == 9


def test_two_sum_without_pair_is_empty():
    assert two_sum([1, 2, 3], 100) == []


@pytest.mark.parametrize("numeral, value", [("LVIII", 58), ("MCMXCIV", 1994)])
def test_roman_to_int(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_to_int_single_letter():
    assert roman_to_int("M") == 1000


def test_roman_to_int_empty_raises():
    with pytest.raises(ValueError):
        roman_to_int("")


@pytest.mark.parametrize(
    "strs", [["flower", "flow", "flight"], ["dog", "racecar", "car"], ["same", "same"]]
)
def test_longest_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    shortest = min(strs, key=len)
    if len(prefix) < len(shortest):
        longer = strs[0][: len(prefix) + 1]
        assert not all(s.startswith(longer) for s in strs)


def test_longest_common_prefix_identical_strings():
    assert longest_common_prefix(["same", "same"]) == "same"


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_is_valid_balanced():
    assert is_valid("()[]{}")
    assert is_valid("{[()]}")


def test_is_valid_unbalanced():
    assert not is_valid("([)]")
    assert not is_valid("}}}")
    assert not is_valid("((")
    assert not is_valid("a")


def test_remove_duplicates_small():
    arr = [1, 1, 2]
    assert remove_duplicates(arr) == 2
    assert arr[:2] == [1, 2]


def test_remove_duplicates_long():
    arr = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(arr)
    n = remove_duplicates(arr)
    assert n == 5
    assert arr[:n] == sorted(set(original))


def test_remove_duplicates_already_unique():
    arr = [0, 1]
    assert remove_duplicates(arr) == len(set(arr))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


@pytest.mark.parametrize(
    "arr, val, expected",
    [([3, 2, 2, 3], 3, 2), ([0, 1, 2, 2, 3, 0, 4, 2], 2, 5)],
)
def test_remove_element(arr, val, expected):
    original = list(arr)
    n = remove_element(arr, val)
    assert n == expected
    assert val not in arr[:n]
    assert sorted(arr[:n]) == sorted(x for x in original if x != val)


def test_remove_element_missing_value_keeps_all():
    arr = [3, 3]
    assert remove_element(arr, 5) == len(arr)
    assert arr == [3, 3]


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [("hello", "ll", 2), ("aaaaa", "bba", -1), ("hello", "", 0)],
)
def test_str_str(haystack, needle, expected):
    assert str_str(haystack, needle) == expected


def test_reverse_round_trip():
    assert reverse(reverse(123)) == 123


def test_reverse_keeps_sign():
    assert reverse(-123) == -reverse(123)


def test_reverse_overflow_is_zero():
    assert reverse(2**31 - 1) == 0
    assert reverse(-(2**31)) == 0


def test_reverse_drops_trailing_zeros():
    assert reverse(-1000) == reverse(-1)


def test_is_palindrome():
    assert is_palindrome(121)
    assert not is_palindrome(-121)
    assert not is_palindrome(10)
    assert all(is_palindrome(d) for d in range(10))