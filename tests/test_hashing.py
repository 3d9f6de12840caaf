import pytest

from dsa_kit.hashing import (
    contains_duplicate,
    group_anagrams,
    is_anagram,
    top_k_frequent,
    two_sum,
)


def test_contains_duplicate_true():
    assert contains_duplicate([1, 1, 1, 3, 3, 4, 3, 2, 4, 2]) is True


def test_contains_duplicate_false():
    assert contains_duplicate([1, 2, 3, 4]) is False


def test_contains_duplicate_short():
    assert contains_duplicate([]) is False
    assert contains_duplicate([7]) is False


def test_group_anagrams():
    got = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    assert got == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]
    assert got != [["bat"], ["nat", "tan"], ["ate", "eat", "tea"]]


def test_group_anagrams_single():
    assert group_anagrams(["bat"]) == [["bat"]]


def test_group_anagrams_empty_word():
    assert group_anagrams(["", ""]) == [["", ""]]


def test_group_anagrams_rejects_non_lowercase():
    with pytest.raises(ValueError):
        group_anagrams(["Bat"])


def test_top_k_frequent_single():
    assert top_k_frequent([1], 1) == [1]


def test_top_k_frequent_two():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_length_is_k():
    assert len(top_k_frequent([1, 1, 2, 2, 3, 3], 2)) == 2


def test_top_k_frequent_zero():
    assert top_k_frequent([1, 2], 0) == []


def test_two_sum():
    assert two_sum([2, 7, 11, 15], 9) == [1, 0]


def test_two_sum_repeated_value():
    assert two_sum([3, 3], 6) == [1, 0]


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_is_anagram():
    assert is_anagram("anagram", "nagaram") is True


def test_is_anagram_three():
    assert is_anagram("aoeu", "ueoa") is True


def test_is_anagram_two():
    assert is_anagram("carnto", "rat") is False


def test_is_anagram_same_length_different_letters():
    assert is_anagram("rat", "car") is False