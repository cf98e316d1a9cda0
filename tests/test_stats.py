from jsonpp.stats import Stat, generate_stat
from jsonpp.value import Array, Object, Value


def test_nested_document():
    document = Value(
        {
            "a": [1, 2.5, "xy"],
            "b": {"c": True, "d": False, "e": None},
            "\u00e9": "\u00f1",
        }
    )
    assert generate_stat(document) == Stat(
        object_count=2,
        array_count=1,
        number_count=2,
        string_count=8,
        true_count=1,
        false_count=1,
        null_count=1,
        member_count=6,
        element_count=3,
        string_length=11,
    )


def test_null_root():
    assert generate_stat(Value()) == Stat(null_count=1)


def test_string_root_counts_bytes():
    stat = generate_stat(Value("\u20ac"))
    assert stat.string_count == 1
    assert stat.string_length == 3


def test_empty_containers():
    assert generate_stat(Value([])) == Stat(array_count=1)
    assert generate_stat(Value({})) == Stat(object_count=1)


def test_accepts_object_directly():
    obj = Object()
    obj["foo"] = True
    obj["bar"] = 3
    beer = Array([True, "asia", "europa", 55, 3.12])
    obj["beer"] = beer
    stat = generate_stat(obj)
    assert stat.object_count == 1
    assert stat.array_count == 1
    assert stat.member_count == 3
    assert stat.element_count == 5
    assert stat.true_count == 2
    assert stat.number_count == 3
    assert stat.string_count == 5
    assert stat.string_length == len("foo") + len("bar") + len("beer") + len("asia") + len("europa")


def test_accepts_plain_python_data():
    stat = generate_stat([None, None, [True]])
    assert stat.null_count == 2
    assert stat.array_count == 2
    assert stat.element_count == 4
    assert stat.true_count == 1