"""
Name: Chunk Merger

Responsibilities:
  - Pack ordered segments greedily into chunks no longer than max_size
  - Top up chunks smaller than min_chunk_size from the previous chunk
  - Report each chunk's true character span in the original text

Collaborators:
  - domain.entities.TextChunk: output type
  - infrastructure.text.pipeline: final stage of split_text_into_chunks

Constraints:
  - No empty chunks; order preserved; indices contiguous from 0
  - Rebalancing never pushes a chunk past max_size, and never takes the
    previous chunk below min_chunk_size
  - A single segment longer than max_size becomes its own chunk

Notes:
  - Segments are joined with a single space inside a chunk
  - A small chunk is never appended wholesale onto the previous one: the
    previous chunk was closed because this chunk's first segment did not
    fit, so the combined text would always exceed max_size
  - Offsets come from a cursor over the source text: non-whitespace
    characters must match in order, whitespace runs match loosely.
    Segments are slices of the source apart from inserted join spaces,
    so the spans are exact even with irregular whitespace. Characters a
    custom splitter drops between segments are skipped when realigning.
"""

from dataclasses import dataclass, field

from ...domain.entities import TextChunk
from ...logger import logger

# R: Slack past the segment length searched when realigning with the source
REALIGN_WINDOW = 200


@dataclass
class _Piece:
    text: str
    start: int
    end: int


@dataclass
class _Draft:
    pieces: list[_Piece] = field(default_factory=list)
    length: int = 0

    def fits(self, piece: _Piece, max_size: int) -> bool:
        return not self.pieces or self.length + 1 + len(piece.text) <= max_size

    def append(self, piece: _Piece) -> None:
        self.length += len(piece.text) + (1 if self.pieces else 0)
        self.pieces.append(piece)

    def prepend(self, piece: _Piece) -> None:
        self.length += len(piece.text) + (1 if self.pieces else 0)
        self.pieces.insert(0, piece)

    def pop(self) -> _Piece:
        piece = self.pieces.pop()
        self.length -= len(piece.text) + (1 if self.pieces else 0)
        return piece

    def to_chunk(self, index: int) -> TextChunk:
        return TextChunk(
            text=" ".join(piece.text for piece in self.pieces),
            index=index,
            start_offset=self.pieces[0].start,
            end_offset=self.pieces[-1].end,
        )


def _match_from(source: str, segment: str, start: int) -> int | None:
    """R: End offset if segment matches source from start, else None."""
    length = len(source)
    i = start
    for char in segment:
        if char.isspace():
            continue
        while i < length and source[i].isspace():
            i += 1
        if i >= length or source[i] != char:
            return None
        i += 1
    return i


def locate_segment(source: str, segment: str, cursor: int) -> tuple[int, int]:
    """
    R: Find the span of segment in source at or after cursor.

    Candidate starts are occurrences of the segment's first non-whitespace
    character within REALIGN_WINDOW characters past cursor + len(segment),
    so characters dropped by a custom splitter (delimiters, markup) are
    skipped. A segment that matches nowhere gets an estimated span starting
    at the first candidate, which keeps the cursor moving.

    Returns:
        (start, end) offsets; (cursor, cursor) for a blank segment
    """
    stripped = segment.strip()
    if not stripped:
        return cursor, cursor

    first = stripped[0]
    limit = min(len(source), cursor + len(segment) + REALIGN_WINDOW)
    start = source.find(first, cursor, limit)
    fallback = start if start != -1 else cursor

    while start != -1:
        end = _match_from(source, stripped, start)
        if end is not None:
            return start, end
        start = source.find(first, start + 1, limit)

    logger.warning(
        "Segment not aligned with source text",
        extra={"cursor": cursor, "segment_preview": segment[:40]},
    )
    return fallback, min(len(source), fallback + len(stripped))


def _rebalance(previous: _Draft, current: _Draft, max_size: int, min_chunk_size: int) -> None:
    while current.length < min_chunk_size and len(previous.pieces) > 1:
        moved = previous.pieces[-1]
        if current.length + 1 + len(moved.text) > max_size:
            break
        if previous.length - len(moved.text) - 1 < min_chunk_size:
            break
        current.prepend(previous.pop())


def _flush(drafts: list[_Draft], current: _Draft, max_size: int, min_chunk_size: int) -> None:
    if not current.pieces:
        return
    if drafts and current.length < min_chunk_size:
        _rebalance(drafts[-1], current, max_size, min_chunk_size)
    drafts.append(current)


def merge_segments_to_limit(
    segments: list[str],
    max_size: int,
    min_chunk_size: int,
    source: str | None = None,
) -> list[TextChunk]:
    """
    Merge ordered segments into size-bounded chunks.

    Args:
        segments: Ordered segments, each normally within max_size
        max_size: Hard per-chunk character limit
        min_chunk_size: Soft floor for standalone chunks
        source: Original text the segments came from (offsets are
            positions in it); defaults to the space-joined segments

    Returns:
        Chunks re-indexed from 0
    """
    if source is None:
        source = " ".join(segments)

    drafts: list[_Draft] = []
    current = _Draft()
    cursor = 0

    for segment in segments:
        if not segment.strip():
            continue

        start, end = locate_segment(source, segment, cursor)
        cursor = max(cursor, end)
        piece = _Piece(text=segment, start=start, end=end)

        if not current.fits(piece, max_size):
            _flush(drafts, current, max_size, min_chunk_size)
            current = _Draft()
        current.append(piece)

    _flush(drafts, current, max_size, min_chunk_size)

    return [draft.to_chunk(index) for index, draft in enumerate(drafts)]
