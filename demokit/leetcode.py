"""Classic array, string and integer puzzles."""

_ROMAN = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_BRACKETS = {")": "(", "]": "[", "}": "{"}

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def two_sum(nums, target):
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target`` and ``i > j``.

    The first pair found scanning left to right wins; an empty list means
    no pair exists.
    """
    seen = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return []


def roman_to_int(s):
    """Convert a Roman numeral to an integer; unknown letters count as zero."""
    if not s:
        raise ValueError("empty roman numeral")
    values = [_ROMAN.get(ch, 0) for ch in s]
    total = 0
    for current, following in zip(values, values[1:]):
        total += current if current >= following else -current
    return total + values[-1]


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("no strings given")
    prefix = []
    for chars in zip(*strs):
        first = chars[0]
        if any(ch != first for ch in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def is_valid(s):
    """Tell whether ``s`` is a balanced sequence of (), [] and {}."""
    stack = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif not stack or stack[-1] != _BRACKETS.get(ch):
            return False
        else:
            stack.pop()
    return not stack


def remove_duplicates(nums):
    """Compact a sorted list in place so its unique values lead; return their count."""
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_element(nums, val):
    """Move every element not equal to ``val`` to the front; return how many there are."""
    i, j = 0, len(nums)
    while i < j:
        if nums[i] != val:
            i += 1
            continue
        while j > i:
            j -= 1
            if nums[j] != val:
                nums[i], nums[j] = nums[j], nums[i]
                break
    return i


def str_str(haystack, needle):
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def reverse(x):
    """Reverse the decimal digits of ``x``; 0 when the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    rest = abs(x)
    result = 0
    while rest:
        rest, digit = divmod(rest, 10)
        result = result * 10 + digit
        if not _INT32_MIN <= sign * result <= _INT32_MAX:
            return 0
    return sign * result


def is_palindrome(x):
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]