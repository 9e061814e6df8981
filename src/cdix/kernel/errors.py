from typing import Optional


class ChunkError(ValueError):
    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f'{message} (at offset {offset})')
        self.offset = offset


class CorruptId(ChunkError):
    def __init__(self, offset: int, given: int) -> None:
        super().__init__(f'expected 4 bytes of chunk tag but got {given}', offset)
        self.given = given


class BadHeader(ChunkError):
    def __init__(self, offset: int, given: int) -> None:
        super().__init__(f'expected 4 bytes of chunk size but got {given}', offset)
        self.given = given


class NotRiffFile(ChunkError):
    def __init__(self, offset: int, tag: str) -> None:
        super().__init__(f'expected root chunk to be RIFF but got {tag}', offset)
        self.tag = tag


class IncompatibleFile(ChunkError):
    def __init__(self, offset: int, file_type: bytes, expected: bytes) -> None:
        super().__init__(
            f'expected file type {expected!r} but got {file_type!r}', offset,
        )
        self.file_type = file_type
        self.expected = expected


class UnknownTag(ChunkError):
    def __init__(self, offset: int, etag: bytes) -> None:
        super().__init__(f'unknown chunk tag {etag!r}', offset)
        self.etag = etag


class TruncatedPayload(ChunkError):
    def __init__(
        self, offset: int, expected: int, given: int, tag: Optional[str] = None
    ) -> None:
        what = f'{tag} payload' if tag else 'payload'
        super().__init__(
            f'expected {what} of size {expected} but got size {given}', offset,
        )
        self.expected = expected
        self.given = given
        self.tag = tag


class TrailingData(ChunkError):
    def __init__(self, offset: int, remaining: int) -> None:
        super().__init__(
            f'{remaining} trailing bytes are too short for a chunk header', offset,
        )
        self.remaining = remaining
