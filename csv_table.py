"""Minimal CSV reader for the earnings exports.

This is deliberately not RFC 4180: lines are split on ``\\n`` and fields on a
literal comma, so a quoted field containing a comma is split in two. Double
quotes are stripped from every field rather than unescaped. Exports from both
platforms are simple enough for this to hold in practice, and the totals shown
to users have always been computed this way.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from errors import EmptyInputError
from logging_setup import get_logger

_LOG = get_logger("daily_earnings.csv_table")


def _clean_field(value: str) -> str:
    return value.strip().replace('"', "")


def split_fields(line: str) -> list[str]:
    return [_clean_field(v) for v in line.split(",")]


@dataclass(frozen=True)
class CsvTable:
    """Header names plus rows of raw string values.

    Every row holds exactly one value per header: short rows are padded with
    ``""`` and values past the last header are dropped.
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def records(self) -> Iterator[Mapping[str, str]]:
        """Yield each row as a read-only ``header -> value`` mapping.

        With duplicate header names the right-most column wins.
        """
        for row in self.rows:
            yield MappingProxyType(dict(zip(self.headers, row)))


def _fit(values: list[str], width: int) -> tuple[str, ...]:
    if len(values) >= width:
        return tuple(values[:width])
    return tuple(values) + ("",) * (width - len(values))


def parse_csv(text: str, *, require_data: bool = True, skip_blank_lines: bool = True) -> CsvTable:
    """Parse ``text`` into a ``CsvTable``.

    ``require_data`` raises ``EmptyInputError`` when the trimmed text has
    fewer than two lines. ``skip_blank_lines`` drops data lines that are empty
    after trimming; when it is off they become all-empty rows.
    """
    lines = text.strip().split("\n")
    if require_data and len(lines) < 2:
        raise EmptyInputError()

    headers = tuple(split_fields(lines[0]))
    width = len(headers)
    rows = []
    skipped = 0
    for line in lines[1:]:
        if skip_blank_lines and not line.strip():
            skipped += 1
            continue
        rows.append(_fit(split_fields(line), width))

    _LOG.debug("parsed %d header(s), %d row(s), %d blank line(s) skipped", width, len(rows), skipped)
    return CsvTable(headers=headers, rows=tuple(rows))
