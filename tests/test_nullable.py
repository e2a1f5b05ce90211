from webhook_models.core.nullable import Nullable


def test_new_wrapper_is_unset():
    n = Nullable[str]()

    assert n.is_set() is False
    assert n.get() is None
    assert n.is_null() is False


def test_set_value():
    n = Nullable[str]()
    n.set("beta")

    assert n.is_set() is True
    assert n.get() == "beta"
    assert n.is_null() is False


def test_set_none_is_explicit_null():
    n = Nullable[str]()
    n.set(None)

    assert n.is_set() is True
    assert n.get() is None
    assert n.is_null() is True


def test_set_nil_matches_set_none():
    a = Nullable[int]()
    a.set_nil()

    assert a == Nullable.of(None)


def test_unset_after_value_and_null():
    n = Nullable.of("beta")
    n.set_nil()
    n.unset()

    assert n.is_set() is False
    assert n.get() is None
    assert n == Nullable()


def test_of_builds_set_wrapper():
    assert Nullable.of(3).is_set() is True
    assert Nullable.of(3).get() == 3


def test_equality_distinguishes_unset_from_null():
    assert Nullable() != Nullable.of(None)
    assert Nullable.of("a") == Nullable.of("a")
    assert Nullable.of("a") != Nullable.of("b")
    assert Nullable.of("a") != "a"


def test_truthiness_only_for_values():
    assert not Nullable()
    assert not Nullable.of(None)
    assert Nullable.of("x")
    # A set falsy value is still a value.
    assert Nullable.of("")
    assert Nullable.of(0)


def test_repr():
    assert repr(Nullable()) == "Nullable(<unset>)"
    assert repr(Nullable.of(None)) == "Nullable(None)"
    assert repr(Nullable.of("x")) == "Nullable('x')"
