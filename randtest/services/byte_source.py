import sys
from pathlib import Path
from abc import ABC, abstractmethod
from config import settings
from randtest.utils.exceptions import FileOpenError, FileReadError

class ByteSource(ABC):
    """Abstract producer of the byte stream handed to the analyser."""

    def __init__(self, chunk_size=None):
        self.chunk_size = chunk_size or settings.chunk_size

    @abstractmethod
    def chunks(self):
        pass

    def _read_chunks(self, f, name):
        while True:
            try:
                chunk = f.read(self.chunk_size)
            except OSError as e:
                raise FileReadError(f"Cannot read {name}") from e
            if not chunk:
                break
            yield chunk

class FileSource(ByteSource):
    def __init__(self, path, chunk_size=None):
        super().__init__(chunk_size)
        self.path = Path(path)

    def _open(self):
        try:
            return open(self.path, "rb")
        except OSError as e:
            raise FileOpenError(f"Cannot open file {self.path}") from e

    def chunks(self):
        with self._open() as f:
            yield from self._read_chunks(f, f"file {self.path}")

class StreamSource(ByteSource):
    """Reads an already open binary stream, standard input by default. The stream is left open."""

    def __init__(self, stream=None, chunk_size=None):
        super().__init__(chunk_size)
        self.stream = stream if stream is not None else sys.stdin.buffer

    def chunks(self):
        yield from self._read_chunks(self.stream, "standard input")

class MemorySource(ByteSource):
    def __init__(self, data: bytes, chunk_size=None):
        super().__init__(chunk_size)
        self.data = bytes(data)

    def chunks(self):
        for start in range(0, len(self.data), self.chunk_size):
            yield self.data[start:start + self.chunk_size]

class CaseFoldingSource(ByteSource):
    """Replaces the bytes of ASCII A-Z with a-z. All other bytes pass through."""

    def __init__(self, inner: ByteSource):
        super().__init__(inner.chunk_size)
        self.inner = inner

    def chunks(self):
        for chunk in self.inner.chunks():
            yield chunk.lower()

class ByteSourceFactory:

    @staticmethod
    def create(path=None, fold=False, stream=None, chunk_size=None):
        if path is not None:
            source = FileSource(path, chunk_size)
        else:
            source = StreamSource(stream, chunk_size)
        if fold:
            source = CaseFoldingSource(source)
        return source
