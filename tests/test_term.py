import pytest

from autocompleteme.term import Term


def test_compare_by_weight_heavier_first():
    assert Term.compare_by_weight(Term("a", 10), Term("b", 3)) == 1


def test_compare_by_weight_equal():
    assert Term.compare_by_weight(Term("a", 7), Term("b", 7)) == 0


def test_compare_by_weight_lighter():
    assert Term.compare_by_weight(Term("a", 1), Term("b", 9)) == -1


def test_compare_by_weight_is_antisymmetric():
    a, b = Term("x", 4), Term("y", 8)
    assert Term.compare_by_weight(a, b) == -Term.compare_by_weight(b, a)


def test_compare_by_prefix_equal_prefixes():
    assert Term.compare_by_prefix(Term("apple", 1), Term("apricot", 2), 2) == 0


def test_compare_by_prefix_first_sorts_earlier():
    assert Term.compare_by_prefix(Term("apple", 1), Term("banana", 2), 3) == 1


def test_compare_by_prefix_first_sorts_later():
    assert Term.compare_by_prefix(Term("banana", 1), Term("apple", 2), 3) == -1


def test_compare_by_prefix_longer_than_query():
    assert Term.compare_by_prefix(Term("ab", 1), Term("ab", 5), 10) == 0


def test_compare_by_prefix_zero_length_always_equal():
    assert Term.compare_by_prefix(Term("zzz", 1), Term("aaa", 2), 0) == 0


def test_compare_by_prefix_negative_raises():
    with pytest.raises(ValueError):
        Term.compare_by_prefix(Term("a", 1), Term("b", 2), -1)


def test_less_than_uses_query_only():
    assert Term("alpha", 100) < Term("beta", 1)
    assert not (Term("beta", 1) < Term("alpha", 100))


def test_sorted_orders_by_query():
    terms = [Term("cherry", 1), Term("apple", 3), Term("banana", 2)]
    assert [t.query for t in sorted(terms)] == ["apple", "banana", "cherry"]


def test_str_is_weight_tab_query():
    assert str(Term("The Matrix", 42)) == "42\tThe Matrix"