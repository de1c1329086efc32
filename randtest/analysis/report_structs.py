import math
from dataclasses import dataclass, field
from typing import Optional, Tuple
from randtest.analysis.symbolizer import Mode

@dataclass(frozen=True)
class Report:
    """Finalized statistics for one analysed stream."""
    mode: Mode
    byte_count: int
    symbol_count: int
    entropy: float
    chi_square: float
    degrees_of_freedom: int
    chi_square_p: float
    mean: float
    monte_carlo_pi: Optional[float]
    monte_carlo_pairs: int
    monte_carlo_inside: int
    serial_correlation: Optional[float]
    counts: Tuple[int, ...] = field(default=(), repr=False)

    @property
    def mean_reference(self) -> float:
        return self.mode.mean_reference

    @property
    def pi_error_percent(self) -> Optional[float]:
        if self.monte_carlo_pi is None:
            return None
        return 100.0 * abs(math.pi - self.monte_carlo_pi) / math.pi

    @property
    def max_entropy(self) -> float:
        return math.log2(self.mode.alphabet_size)
