from enum import Enum
import numpy as np

class Mode(Enum):
    BYTE = "byte"
    BIT = "bit"

    @property
    def alphabet_size(self) -> int:
        return 256 if self is Mode.BYTE else 2

    @property
    def symbols_per_byte(self) -> int:
        return 1 if self is Mode.BYTE else 8

    @property
    def unit(self) -> str:
        return self.value

    @property
    def mean_reference(self) -> float:
        return (self.alphabet_size - 1) / 2.0


class Symbolizer:
    """
    Projects input bytes onto the symbol alphabet of a fixed Mode.
    Bytes are forwarded untouched to byte_sinks (Monte-Carlo); the expanded
    symbols go to symbol_sinks. Bit mode expands least-significant bit first.
    Every sink exposes update(value) and update_many(array).
    """
    __slots__ = ("mode", "symbol_sinks", "byte_sinks")

    def __init__(self, mode: Mode, symbol_sinks=(), byte_sinks=()):
        self.mode = mode
        self.symbol_sinks = tuple(symbol_sinks)
        self.byte_sinks = tuple(byte_sinks)

    def expand(self, byte: int) -> tuple:
        if self.mode is Mode.BYTE:
            return (byte,)
        return tuple((byte >> b) & 1 for b in range(8))

    def expand_many(self, arr: np.ndarray) -> np.ndarray:
        if self.mode is Mode.BYTE:
            return arr
        return np.unpackbits(arr, bitorder="little")

    def ingest(self, byte: int):
        if not 0 <= byte <= 255:
            raise ValueError(f"byte value out of range: {byte}")
        for sink in self.byte_sinks:
            sink.update(byte)
        for symbol in self.expand(byte):
            for sink in self.symbol_sinks:
                sink.update(symbol)

    def ingest_chunk(self, data) -> int:
        arr = np.frombuffer(bytes(data), dtype=np.uint8)
        if arr.size == 0:
            return 0
        for sink in self.byte_sinks:
            sink.update_many(arr)
        symbols = self.expand_many(arr)
        for sink in self.symbol_sinks:
            sink.update_many(symbols)
        return int(arr.size)
