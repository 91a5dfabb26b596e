import numpy as np
import pandas as pd
import suite
from datagen import from_schema
from colinq import List, Queue, Dictionary, from_iterable, dictionary_of, empty

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

# test data schemas
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
    'badge': {'_provider': 'ref', 'key': 'id'},
    'active': {'_provider': 'literal', 'value': True}
}


# numpy / pandas conversions

@test("to_numpy converts sequences to arrays")
def test_to_numpy():
    arr = from_iterable([1, 2, 3]).to_numpy()
    assert_that(isinstance(arr, np.ndarray), "ndarray")
    assert_equal(arr.sum(), 6, "sum")
    assert_equal(empty().to_numpy().shape, (0,), "empty array")


@test("to_pandas converts lists and queues to series")
def test_to_pandas_sequence():
    series = List([1.5, 2.5]).to_pandas()
    assert_that(isinstance(series, pd.Series), "series")
    assert_equal(series.tolist(), [1.5, 2.5], "values")
    assert_equal(Queue(['a']).to_pandas().tolist(), ['a'], "queue values")


@test("dictionary to_pandas indexes values by key in insertion order")
def test_to_pandas_dictionary():
    series = dictionary_of(b=2, a=1).to_pandas()
    assert_equal(list(series.index), ['b', 'a'], "index keeps insertion order")
    assert_equal(series['a'], 1, "lookup by key")


# generated-record scenarios

@test("generated records flow through list queries")
def test_generated_list():
    people = from_schema(person_schema, seed=42).take(25)
    assert_equal(people.length(), 25, "record count")
    assert_that(people.all(lambda p: 18 <= p['age'] <= 65), "ages in range")
    assert_that(people.all(lambda p: p['badge'] == p['id']), "ref provider copies the id")

    engineers = people.where(lambda p: p['department'] == 'eng')
    assert_that(engineers.all(lambda p: p['department'] == 'eng'), "filter holds")
    assert_equal(engineers.length() + people.where(lambda p: p['department'] != 'eng').length(), 25, "partition")

    oldest = people.select(lambda p: p['age']).to_numpy().max()
    assert_equal(people.first(lambda p: p['age'] == oldest)['age'], oldest, "first finds the oldest")


@test("generated records keyed into a dictionary stay consistent")
def test_generated_dictionary():
    by_id = from_schema(person_schema, seed=7).take_dictionary(40, 'id')
    assert_that(isinstance(by_id, Dictionary), "dictionary")
    keys = by_id.get_keys().to_array()
    assert_equal(len(keys), len(set(keys)), "unique ids")
    assert_that(by_id.all(lambda pair: pair.value['id'] == pair.key), "pairs line up")
    frame = pd.DataFrame(by_id.get_values().to_array())
    assert_equal(len(frame), by_id.length(), "one row per entry")


@test("generated records drain from a queue in order")
def test_generated_queue():
    queue = from_schema(person_schema, seed=3).take_queue(5)
    expected = queue.select(lambda p: p['id']).to_array()
    drained = []
    while not queue.is_empty():
        drained.append(queue.dequeue()['id'])
    assert_equal(drained, expected, "fifo order")


@test("the same seed reproduces the same records")
def test_seeded_generation():
    first = from_schema(person_schema, seed=11).take(5).to_array()
    second = from_schema(person_schema, seed=11).take(5).to_array()
    assert_equal(first, second, "seeded output")


if __name__ == "__main__":
    suite.main("colinq conversion and generated data test suite")
