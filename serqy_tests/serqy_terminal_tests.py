import numpy as np
import pandas as pd
import suite
from dgen import from_schema
from serqy import S, Index

test = suite.test
assert_that = suite.assert_that

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10_000}),
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'team': {'_qen_provider': 'choice', 'from': ['core', 'infra', 'data']},
}

prices = S({'values': [9.5, 12.0, 3.25], 'index': ['apple', 'pear', 'plum']})


# to accessor

@test("list, pairs and keys conversions")
def test_to_list_pairs_keys():
    assert_that(prices.to.list() == [9.5, 12.0, 3.25], "list should hold values")
    assert_that(prices.to.pairs() == [('apple', 9.5), ('pear', 12.0), ('plum', 3.25)], "pairs should hold both")
    assert_that(prices.to.keys() == ['apple', 'pear', 'plum'], "keys should hold the index")


@test("dict conversion keeps the last duplicate")
def test_to_dict():
    s = S({'values': [1, 2, 3], 'index': ['a', 'b', 'a']})
    assert_that(s.to.dict() == {'a': 3, 'b': 2}, "later duplicates should win")


@test("array conversion creates numpy array")
def test_to_array_numpy():
    result = S([1, 2, 3]).to.array()
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array([1, 2, 3])), "array should hold the values")


@test("pandas conversion keeps the index")
def test_to_pandas():
    result = prices.to.pandas(name='price')
    assert_that(isinstance(result, pd.Series), "should return a pandas series")
    assert_that(list(result.index) == ['apple', 'pear', 'plum'], "keys should become the pandas index")
    assert_that(result.name == 'price', "name should be applied")
    assert_that(result['pear'] == 12.0, "values should be addressable by key")


@test("pandas conversion of an empty series")
def test_to_pandas_empty():
    result = S().to.pandas()
    assert_that(len(result) == 0, "empty series should give an empty pandas series")


@test("count counts pairs")
def test_count():
    assert_that(prices.to.count() == 3, "three pairs expected")
    assert_that(S().to.count() == 0, "empty series counts zero")


# inflate

@test("inflate mapping values into columns")
def test_inflate_records():
    people = from_schema(person_schema, seed=11).keyed('id', 8)
    frame = people.inflate()
    assert_that(isinstance(frame, pd.DataFrame), "inflate should return a dataframe")
    assert_that(len(frame) == 8, "one row per value")
    assert_that(set(frame.columns) == {'id', 'name', 'age', 'team'}, f"columns from record keys: {list(frame.columns)}")
    assert_that(list(frame.index) == people.to.keys(), "series keys should index the rows")


@test("inflate scalars into a value column")
def test_inflate_scalars():
    frame = prices.inflate()
    assert_that(list(frame.columns) == ['value'], "scalars should land in one column")
    assert_that(frame.loc['plum', 'value'] == 3.25, "rows should be indexed by key")


@test("inflate with a row selector")
def test_inflate_selector():
    frame = prices.inflate(lambda price: {'price': price, 'cheap': price < 10})
    assert_that(list(frame['cheap']) == [True, False, True], "selector output should become columns")
    assert_that(frame.equals(prices.to.df(lambda price: {'price': price, 'cheap': price < 10})),
                "to.df and inflate should agree")


@test("inflate an empty series")
def test_inflate_empty():
    frame = S().inflate()
    assert_that(frame.empty, "empty series inflates to an empty frame")


# display

@test("str renders keys and values")
def test_str():
    text = str(S({'values': ['x', 'y'], 'index': ['k1', 'k2']}))
    assert_that('k1' in text and 'y' in text, f"rendering should show keys and values: {text}")


# index collaborator

@test("index exposes keys and count")
def test_index_collaborator():
    index = Index(['a', 'b', 'c'])
    assert_that(list(index) == ['a', 'b', 'c'], "iteration yields keys in order")
    assert_that(index.count() == 3 and len(index) == 3, "count of an array index is known")
    assert_that(not index.is_baked, "counting an array index needs no walk")


@test("lazy index count walks and caches")
def test_index_lazy_count():
    index = Index(k for k in 'pqr')
    assert_that(index.count() == 3, "count should walk a generator")
    assert_that(index.to_array() == ['p', 'q', 'r'], "keys should still be readable after counting")
    assert_that(index.bake() is index, "a baked index bakes to itself")


@test("default index is sequential")
def test_default_index():
    assert_that(Index.default(4).to_array() == [0, 1, 2, 3], "default keys start at zero")
    assert_that(S(['a', 'b']).reset_index().get_index().to_array() == Index.default(2).to_array(),
                "reset_index should match the default index")


if __name__ == "__main__":
    suite.run(title="serqy terminal test suite")
