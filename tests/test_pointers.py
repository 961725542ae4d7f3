from rustdrills.drills.pointers import (
    Cons,
    Nil,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()
    assert isinstance(create_non_empty_list(), Cons)


def test_reference_mutation():
    borrowed = (-1, 0, 1)
    result = abs_all(borrowed)
    assert isinstance(result, list)
    assert result == [1, 0, 1]
    assert borrowed == (-1, 0, 1)


def test_reference_no_mutation():
    borrowed = (0, 1, 2)
    result = abs_all(borrowed)
    assert result is borrowed


def test_owned_no_mutation():
    owned = [0, 1, 2]
    result = abs_all(owned)
    assert result is owned
    assert result == [0, 1, 2]


def test_owned_mutation():
    owned = [-1, 0, 1]
    result = abs_all(owned)
    assert result is owned
    assert owned == [1, 0, 1]