from rustdrills.drills.basics import (
    array_and_vec,
    bigger,
    foo_if_fizz,
    is_even,
    longest,
    sale_price,
    square,
    vec_loop,
    vec_map,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_sale_price_even_and_odd():
    assert sale_price(50) == 40
    assert sale_price(51) == 48


def test_is_even():
    assert is_even(4) is True
    assert is_even(5) is False


def test_square():
    assert square(3) == 9


def test_array_and_vec_similarity():
    array, values = array_and_vec()
    assert list(array) == values


def test_vec_loop_doubles_in_place():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map_returns_new_list():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_longest():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("xyz", "abcd") == "abcd"


def test_longest_counts_bytes():
    assert longest("é", "ab") == "ab"
    assert longest("éé", "abc") == "éé"