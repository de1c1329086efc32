import math
import pytest
import numpy as np
from randtest.analysis.stats import FrequencyCounter, MonteCarloPi, SerialCorrelation
from tests.helpers import reference_monte_carlo, reference_serial_correlation, reference_entropy

def _feed(acc, data):
    for value in data:
        acc.update(value)
    return acc

def test_frequency_counter_single_and_bulk_agree(random_bytes):
    data = random_bytes[:5000]
    one = _feed(FrequencyCounter(256), data)
    bulk = FrequencyCounter(256)
    bulk.update_many(np.frombuffer(data, dtype=np.uint8))

    assert one.n == bulk.n == len(data)
    assert np.array_equal(one.counts, bulk.counts)
    assert int(bulk.counts.sum()) == bulk.n

def test_frequency_counter_statistics(random_bytes):
    data = random_bytes[:3000]
    acc = FrequencyCounter(256)
    acc.update_many(np.frombuffer(data, dtype=np.uint8))

    assert acc.entropy() == pytest.approx(reference_entropy(list(data)), abs=1e-9)
    assert acc.mean() == pytest.approx(sum(data) / len(data), abs=1e-9)
    expected = len(data) / 256
    chisq = sum((int(c) - expected) ** 2 / expected for c in acc.counts)
    assert acc.chi_square() == pytest.approx(chisq, rel=1e-12)

def test_frequency_counter_empty():
    acc = FrequencyCounter(2)
    assert acc.entropy() == 0.0
    assert acc.chi_square() == 0.0
    assert acc.mean() == 0.0

def test_monte_carlo_origin_pair_is_inside():
    acc = _feed(MonteCarloPi(), bytes(6))
    assert (acc.pairs, acc.inside) == (1, 1)
    assert acc.pi() == 4.0

def test_monte_carlo_far_corner_is_outside():
    acc = _feed(MonteCarloPi(), b"\xff" * 6)
    assert (acc.pairs, acc.inside) == (1, 0)
    assert acc.pi() == 0.0

def test_monte_carlo_partial_pair_discarded():
    acc = _feed(MonteCarloPi(), bytes(11))
    assert acc.pairs == 1
    assert acc.nbytes == 2 and acc.is_y

def test_monte_carlo_undefined_without_pairs():
    assert _feed(MonteCarloPi(), bytes(5)).pi() is None

def test_monte_carlo_coordinates_are_big_endian():
    # x = 0x800000 / 2^24 = 0.5, y = 0x000001 / 2^24
    acc = _feed(MonteCarloPi(), b"\x80\x00\x00\x00\x00\x01")
    assert acc.inside == 1
    acc = _feed(MonteCarloPi(), b"\xb6\x00\x00\xb6\x00\x00")  # 0.7109375^2 * 2 > 1
    assert acc.inside == 0

@pytest.mark.parametrize("split", [0, 1, 2, 3, 4, 5, 6, 7, 13])
def test_monte_carlo_bulk_matches_bytewise(random_bytes, split):
    data = random_bytes[:6001]
    bytewise = _feed(MonteCarloPi(), data)
    bulk = MonteCarloPi()
    arr = np.frombuffer(data, dtype=np.uint8)
    bulk.update_many(arr[:split])
    bulk.update_many(arr[split:])

    assert (bulk.pairs, bulk.inside) == (bytewise.pairs, bytewise.inside)
    assert (bulk.pairs, bulk.inside) == reference_monte_carlo(data)
    assert (bulk.nbytes, bulk.is_y) == (bytewise.nbytes, bytewise.is_y)

def test_serial_correlation_alternating_is_minus_one():
    acc = _feed(SerialCorrelation(), [0, 1, 0, 1])
    assert acc.coefficient() == pytest.approx(-1.0)

@pytest.mark.parametrize("values", [[], [7], [3, 3, 3, 3]])
def test_serial_correlation_undefined(values):
    assert _feed(SerialCorrelation(), values).coefficient() is None

def test_serial_correlation_closes_ring():
    acc = _feed(SerialCorrelation(), [1, 2, 3])
    # 1*2 + 2*3 + 3*1
    assert acc.cross_sum() == 11
    assert acc.scp == 8

def test_serial_correlation_matches_centred_reference(random_bytes):
    data = list(random_bytes[:4000])
    acc = _feed(SerialCorrelation(), data)
    assert acc.coefficient() == pytest.approx(reference_serial_correlation(data), abs=1e-9)

def test_serial_correlation_bulk_matches_single(random_bytes):
    arr = np.frombuffer(random_bytes[:4000], dtype=np.uint8)
    single = _feed(SerialCorrelation(), [int(v) for v in arr])
    bulk = SerialCorrelation()
    for piece in np.array_split(arr, 7):
        bulk.update_many(piece)
    bulk.update_many(arr[:0])

    assert (bulk.first, bulk.last, bulk.s1, bulk.s2, bulk.scp, bulk.n) == \
        (single.first, single.last, single.s1, single.s2, single.scp, single.n)

def test_serial_correlation_sums_do_not_overflow():
    acc = SerialCorrelation()
    block = np.full(1 << 20, 255, dtype=np.uint8)
    block[::2] = 0
    for _ in range(64):
        acc.update_many(block)
    assert acc.s2 == 255 * 255 * (1 << 19) * 64
    assert math.isclose(acc.coefficient(), -1.0, abs_tol=1e-9)
