import numpy as np

# bytes per Monte-Carlo coordinate; a pair uses two coordinates
COORD_BYTES = 3
PAIR_BYTES = 2 * COORD_BYTES
COORD_SCALE = float(1 << (8 * COORD_BYTES))
# (x/2^24)^2 + (y/2^24)^2 <= 1  <=>  X^2 + Y^2 <= 2^48
_RADIUS_SQ = 1 << (16 * COORD_BYTES)


class FrequencyCounter:
    __slots__ = ("counts", "n", "alphabet_size")

    def __init__(self, alphabet_size: int):
        self.alphabet_size = alphabet_size
        self.counts = np.zeros(alphabet_size, dtype=np.int64)
        self.n = 0

    def update(self, symbol: int):
        self.counts[symbol] += 1
        self.n += 1

    def update_many(self, symbols: np.ndarray):
        self.counts += np.bincount(symbols, minlength=self.alphabet_size).astype(np.int64)
        self.n += int(symbols.size)

    def entropy(self) -> float:
        if self.n == 0:
            return 0.0
        p = self.counts[self.counts > 0] / self.n
        return max(0.0, float(-(p * np.log2(p)).sum()))

    def chi_square(self) -> float:
        if self.n == 0:
            return 0.0
        expected = self.n / self.alphabet_size
        diff = self.counts - expected
        return float((diff * diff).sum() / expected)

    def mean(self) -> float:
        if self.n == 0:
            return 0.0
        values = np.arange(self.alphabet_size, dtype=np.float64)
        return float(np.dot(values, self.counts) / self.n)


class MonteCarloPi:
    """
    Assembles (x, y) pairs from consecutive bytes, three big-endian bytes per
    coordinate, and counts pairs falling in the unit quarter-circle.
    A coordinate still incomplete at end of stream is never counted.
    """
    __slots__ = ("accum", "nbytes", "is_y", "x", "pairs", "inside")

    def __init__(self):
        self.accum = 0
        self.nbytes = 0
        self.is_y = False
        self.x = 0.0
        self.pairs = 0
        self.inside = 0

    def update(self, byte: int):
        self.accum = (self.accum << 8) | byte
        self.nbytes += 1
        if self.nbytes < COORD_BYTES:
            return
        coord = self.accum / COORD_SCALE
        self.accum = 0
        self.nbytes = 0
        if not self.is_y:
            self.x = coord
            self.is_y = True
            return
        self.is_y = False
        if self.x * self.x + coord * coord <= 1.0:
            self.inside += 1
        self.pairs += 1

    def at_pair_boundary(self) -> bool:
        return self.nbytes == 0 and not self.is_y

    def update_many(self, arr: np.ndarray):
        i, size = 0, int(arr.size)
        while i < size and not self.at_pair_boundary():
            self.update(int(arr[i]))
            i += 1

        whole = (size - i) // PAIR_BYTES * PAIR_BYTES
        if whole:
            block = arr[i:i + whole].astype(np.int64).reshape(-1, PAIR_BYTES)
            xs = (block[:, 0] << 16) | (block[:, 1] << 8) | block[:, 2]
            ys = (block[:, 3] << 16) | (block[:, 4] << 8) | block[:, 5]
            self.inside += int(np.count_nonzero(xs * xs + ys * ys <= _RADIUS_SQ))
            self.pairs += int(block.shape[0])
            i += whole

        for byte in arr[i:]:
            self.update(int(byte))

    def pi(self):
        if self.pairs == 0:
            return None
        return 4.0 * self.inside / self.pairs


class SerialCorrelation:
    """
    Lag-1 serial correlation over the symbol sequence treated as a ring.
    The sums are exact integers so no precision is lost for long streams.
    """
    __slots__ = ("first", "last", "s1", "s2", "scp", "n")

    def __init__(self):
        self.first = 0
        self.last = 0
        self.s1 = 0
        self.s2 = 0
        self.scp = 0
        self.n = 0

    def update(self, x: int):
        if self.n == 0:
            self.first = x
        else:
            self.scp += self.last * x
        self.s1 += x
        self.s2 += x * x
        self.last = x
        self.n += 1

    def update_many(self, symbols: np.ndarray):
        if symbols.size == 0:
            return
        s = symbols.astype(np.int64)
        if self.n == 0:
            self.first = int(s[0])
        else:
            self.scp += self.last * int(s[0])
        self.scp += int(np.dot(s[:-1], s[1:]))
        self.s1 += int(s.sum())
        self.s2 += int(np.dot(s, s))
        self.last = int(s[-1])
        self.n += int(s.size)

    def cross_sum(self) -> int:
        # wrap the last symbol around to the first
        if self.n == 0:
            return 0
        return self.scp + self.last * self.first

    def coefficient(self):
        n = self.n
        numerator = n * self.cross_sum() - self.s1 * self.s1
        denominator = n * self.s2 - self.s1 * self.s1
        if denominator == 0:
            return None
        return numerator / denominator
