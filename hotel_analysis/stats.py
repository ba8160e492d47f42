from typing import Callable, Iterable, Tuple, TypeVar

T = TypeVar("T")


def get_range(items: Iterable[T], extractor: Callable[[T], float]) -> Tuple[float, float]:
    """Return (min, max) of extractor(item) over items in a single pass.

    An empty collection yields (0.0, 0.0) rather than raising.
    """
    lo = hi = None
    for item in items:
        value = extractor(item)
        if lo is None:
            lo = hi = value
            continue
        if value < lo:
            lo = value
        elif value > hi:
            hi = value

    if lo is None:
        return 0.0, 0.0
    return lo, hi


def normalize(value: float, min_value: float, max_value: float, default: float) -> float:
    """Rescale value into [0, 1] against the observed range.

    When the range is degenerate (max == min, compared exactly) the caller's
    default is returned unchanged.
    """
    if max_value == min_value:
        return default
    return (value - min_value) / (max_value - min_value)
