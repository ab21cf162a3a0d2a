from __future__ import annotations

import io
from typing import Iterable, List

import pytest


class FakeTerminal:
    """In-memory screen + scripted input standing in for ``TerminalSession``."""

    def __init__(
        self, chunks: Iterable[bytes] = (), *, rows: int = 24, columns: int = 80
    ) -> None:
        self.output = io.BytesIO()
        self.rows = rows
        self.columns = columns
        self._chunks: List[bytes] = list(chunks)
        self.reads: List[int] = []
        self.flushes = 0

    def read(self, size: int) -> bytes:
        self.reads.append(size)
        if not self._chunks:
            return b""
        return self._chunks.pop(0)

    def write(self, data: bytes) -> None:
        self.output.write(data)

    def flush(self) -> None:
        self.flushes += 1

    def size(self) -> tuple[int, int]:
        return self.rows, self.columns

    def take(self) -> bytes:
        data = self.output.getvalue()
        self.output.seek(0)
        self.output.truncate()
        return data


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "TTE_INITIAL_CAPACITY",
        "TTE_READ_SIZE",
        "TTE_HIGHLIGHT",
        "TTE_LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
