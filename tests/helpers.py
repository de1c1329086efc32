import math

def bit_symbols(data: bytes) -> list[int]:
    """Least-significant-bit-first expansion of each byte."""
    return [(b >> i) & 1 for b in data for i in range(8)]

def popcount(b: int) -> int:
    return bin(b).count("1")

def reference_monte_carlo(data: bytes):
    """Straightforward pair-by-pair estimate; returns (pairs, inside)."""
    pairs = inside = 0
    for start in range(0, len(data) - 5, 6):
        x = int.from_bytes(data[start:start + 3], "big") / 2 ** 24
        y = int.from_bytes(data[start + 3:start + 6], "big") / 2 ** 24
        pairs += 1
        if x * x + y * y <= 1.0:
            inside += 1
    return pairs, inside

def reference_serial_correlation(symbols: list[int]):
    """Circular lag-1 Pearson correlation computed from centred products."""
    n = len(symbols)
    if n == 0:
        return None
    mean = sum(symbols) / n
    var = sum((s - mean) ** 2 for s in symbols)
    if var == 0:
        return None
    cov = sum((symbols[i] - mean) * (symbols[(i + 1) % n] - mean) for i in range(n))
    return cov / var

def reference_entropy(symbols: list[int]) -> float:
    n = len(symbols)
    counts = {}
    for s in symbols:
        counts[s] = counts.get(s, 0) + 1
    return -sum(c / n * math.log2(c / n) for c in counts.values())
