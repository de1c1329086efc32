from randtest.analysis.symbolizer import Mode, Symbolizer
from randtest.analysis.stats import FrequencyCounter, MonteCarloPi, SerialCorrelation
from randtest.analysis.chisq import chisq_tail
from randtest.analysis.report_structs import Report
from randtest.services.byte_source import MemorySource

class SequenceAnalyzer:
    """
    Single-pass fold over a byte stream. Create one per stream, feed it with
    ingest() or ingest_chunk(), then call finalize().
    """

    def __init__(self, mode: Mode = Mode.BYTE, tail_method: str = None):
        self.mode = mode
        self.tail_method = tail_method
        self.byte_count = 0
        self.frequency = FrequencyCounter(mode.alphabet_size)
        self.monte_carlo = MonteCarloPi()
        self.serial = SerialCorrelation()
        self.symbolizer = Symbolizer(
            mode,
            symbol_sinks=(self.frequency, self.serial),
            byte_sinks=(self.monte_carlo,),
        )

    @property
    def symbol_count(self) -> int:
        return self.frequency.n

    @property
    def counts(self):
        return self.frequency.counts

    def ingest(self, byte: int):
        self.symbolizer.ingest(byte)
        self.byte_count += 1

    def ingest_chunk(self, data):
        self.byte_count += self.symbolizer.ingest_chunk(data)

    def finalize(self) -> Report:
        df = self.mode.alphabet_size - 1
        chi_square = self.frequency.chi_square()
        return Report(
            mode=self.mode,
            byte_count=self.byte_count,
            symbol_count=self.frequency.n,
            entropy=self.frequency.entropy(),
            chi_square=chi_square,
            degrees_of_freedom=df,
            chi_square_p=chisq_tail(chi_square, df, method=self.tail_method),
            mean=self.frequency.mean(),
            monte_carlo_pi=self.monte_carlo.pi(),
            monte_carlo_pairs=self.monte_carlo.pairs,
            monte_carlo_inside=self.monte_carlo.inside,
            serial_correlation=self.serial.coefficient(),
            counts=tuple(int(c) for c in self.frequency.counts),
        )


def analyze_bytes(data, mode: Mode = Mode.BYTE, tail_method: str = None, chunk_size=None) -> Report:
    return analyze_source(MemorySource(data, chunk_size=chunk_size), mode, tail_method=tail_method)


def analyze_source(source, mode: Mode = Mode.BYTE, tail_method: str = None) -> Report:
    analyzer = SequenceAnalyzer(mode, tail_method=tail_method)
    for chunk in source.chunks():
        analyzer.ingest_chunk(chunk)
    return analyzer.finalize()
