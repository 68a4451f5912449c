import suite
from dgen import from_schema, Generator

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

order_schema = {
    'sku': 'ean8',
    'qty': ('pyint', {'min_value': 1, 'max_value': 9}),
    'channel': {'_qen_provider': 'choice', 'from': ['web', 'store']},
    'note': {'_qen_provider': 'literal', 'value': None},
    'copy_of_qty': {'_qen_provider': 'ref', 'key': 'qty'},
}


@test("take returns a baked series of records")
def test_take():
    orders = from_schema(order_schema, seed=1).take(10)
    assert_that(orders.is_baked, "take should bake")
    assert_that(orders.get_index().to_array() == list(range(10)), "records keyed 0..n-1")
    for order in orders:
        assert_that(1 <= order['qty'] <= 9, "qty within bounds")
        assert_that(order['channel'] in ('web', 'store'), "channel from choices")
        assert_that(order['note'] is None, "literal passed through")
        assert_that(order['copy_of_qty'] == order['qty'], "ref should copy a sibling")


@test("seeded generation is reproducible")
def test_seeded():
    first = from_schema(order_schema, seed=99).take(5).to_array()
    second = from_schema(order_schema, seed=99).take(5).to_array()
    assert_that(first == second, "same seed should give same records")


@test("keyed uses a record field as key")
def test_keyed():
    orders = from_schema(order_schema, seed=5).keyed('sku', 4)
    for key, order in orders.to_pairs():
        assert_that(key == order['sku'], "key should be the record's sku")


@test("stream stays lazy over an endless generator")
def test_stream():
    stream = from_schema(order_schema, seed=2).stream()
    assert_that(not stream.is_baked, "stream should not be baked")
    it = iter(stream.select(lambda order, i: order['qty']))
    quantities = [next(it) for _ in range(20)]
    assert_that(all(1 <= q <= 9 for q in quantities), "streamed values should be generated on demand")


@test("unknown providers are rejected")
def test_bad_provider():
    gen = Generator(seed=0)
    assert_raises(ValueError, lambda: gen.create({'_qen_provider': 'nope'}), "unknown provider")
    assert_raises(ValueError, lambda: gen.create(('not_a_faker_method', {})), "unknown faker method")
    assert_raises(ValueError, lambda: gen.create({'_qen_provider': 'ref', 'key': 'missing'}), "dangling ref")


if __name__ == "__main__":
    suite.run(title="dgen test suite")
