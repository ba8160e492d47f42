from hotel_analysis.stats import get_range, normalize


def test_get_range_empty_returns_zeroes():
    assert get_range([], lambda x: x) == (0.0, 0.0)


def test_get_range_values_come_from_items():
    values = [3.5, -1.0, 7.25, 0.0, 7.25]
    lo, hi = get_range(values, lambda x: x)
    assert lo <= hi
    assert (lo, hi) == (-1.0, 7.25)
    assert lo in values and hi in values


def test_get_range_uses_extractor():
    items = [{"v": 4}, {"v": 2}, {"v": 9}]
    assert get_range(items, lambda d: d["v"]) == (2, 9)


def test_get_range_consumes_iterable_once():
    seen = []

    def gen():
        for v in (5.0, 1.0, 3.0):
            seen.append(v)
            yield v

    assert get_range(gen(), lambda x: x) == (1.0, 5.0)
    assert seen == [5.0, 1.0, 3.0]


def test_identical_values_give_degenerate_range_and_default():
    lo, hi = get_range([0.4, 0.4, 0.4], lambda x: x)
    assert (lo, hi) == (0.4, 0.4)
    assert normalize(0.4, lo, hi, 1.0) == 1.0
    assert normalize(0.4, lo, hi, 0.0) == 0.0


def test_normalize_endpoints_and_midpoint():
    assert normalize(10.0, 10.0, 20.0, 0.5) == 0.0
    assert normalize(20.0, 10.0, 20.0, 0.5) == 1.0
    assert abs(normalize(15.0, 10.0, 20.0, 0.5) - 0.5) < 1e-12


def test_normalize_is_not_clamped():
    assert normalize(30.0, 10.0, 20.0, 0.0) == 2.0
