import pytest

from dailyalgos.strings import find_index, group_anagrams, is_isomorphic, longest_palindrome


@pytest.mark.parametrize(
    "haystack, needle", [("sadbutsad", "sad"), ("hello", "ll"), ("aaaab", "aab"), ("abc", "c")]
)
def test_find_index_finds_first_occurrence(haystack, needle):
    index = find_index(haystack, needle)
    assert haystack[index : index + len(needle)] == needle
    assert needle not in haystack[: index + len(needle) - 1]


def test_find_index_missing():
    assert find_index("leetcode", "leeto") == -1


@pytest.mark.parametrize("s, t", [("egg", "add"), ("paper", "title"), ("ab", "ab")])
def test_is_isomorphic_true(s, t):
    assert is_isomorphic(s, t) is True


@pytest.mark.parametrize("s, t", [("foo", "bar"), ("badc", "baba"), ("ab", "abc")])
def test_is_isomorphic_false(s, t):
    assert is_isomorphic(s, t) is False


@pytest.mark.parametrize("s, t", [("egg", "add"), ("foo", "bar"), ("badc", "baba")])
def test_is_isomorphic_symmetric(s, t):
    assert is_isomorphic(s, t) == is_isomorphic(t, s)


def test_group_anagrams_partitions_words():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    keys = [{"".join(sorted(w)) for w in g} for g in groups]
    assert all(len(k) == 1 for k in keys)
    assert len({next(iter(k)) for k in keys}) == len(groups)


def test_group_anagrams_keeps_order_within_group():
    words = ["tea", "eat", "ate"]
    assert group_anagrams(words) == [words]


@pytest.mark.parametrize("s", ["babad", "cbbd", "a", "forgeeksskeegfor", "abacdfgdcaba"])
def test_longest_palindrome_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    for i in range(len(s)):
        for j in range(i + len(result) + 1, len(s) + 1):
            assert s[i:j] != s[i:j][::-1]


def test_longest_palindrome_first_of_equal_length():
    assert longest_palindrome("babad") == "bab"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""