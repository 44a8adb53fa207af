from drillkit.lessons.conslist import Cons, Nil, create_empty_list, create_non_empty_list


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert isinstance(non_empty, Cons)
    assert list(non_empty) == [1]


def test_iteration_over_longer_list():
    assert list(Cons(1, Cons(2, Cons(3, Nil())))) == [1, 2, 3]


def test_empty_list_iterates_to_nothing():
    assert list(create_empty_list()) == []