import pytest
import numpy as np
from randtest.analysis.symbolizer import Mode
from randtest.analysis.engine import SequenceAnalyzer

@pytest.fixture
def byte_analyzer():
    return SequenceAnalyzer(Mode.BYTE)

@pytest.fixture
def bit_analyzer():
    return SequenceAnalyzer(Mode.BIT)

@pytest.fixture
def ascending_bytes():
    """Every byte value 0x00..0xFF exactly once."""
    return bytes(range(256))

@pytest.fixture
def random_bytes():
    """A fixed pseudo-random sample, large enough for the statistics to settle."""
    rng = np.random.default_rng(20081028)
    return rng.integers(0, 256, size=120_000, dtype=np.uint8).tobytes()

@pytest.fixture
def sample_file(tmp_path, random_bytes):
    path = tmp_path / "sample.bin"
    path.write_bytes(random_bytes)
    return path
