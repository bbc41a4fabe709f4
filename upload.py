"""Turning an uploaded file into text for the aggregators.

Pages hand over Streamlit's ``UploadedFile``; anything with the same three
attributes works, which keeps the engine testable without a browser.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from errors import InvalidFileTypeError, ReadFailureError
from logging_setup import get_logger

_LOG = get_logger("daily_earnings.upload")

CSV_CONTENT_TYPES = frozenset({"text/csv"})


@runtime_checkable
class UploadedCsv(Protocol):
    name: str
    type: str

    def getvalue(self) -> bytes: ...


def is_csv_upload(upload: UploadedCsv, *, accept_content_type: bool = False) -> bool:
    if (upload.name or "").lower().endswith(".csv"):
        return True
    return accept_content_type and (upload.type or "").lower() in CSV_CONTENT_TYPES


def validate_csv_upload(upload: UploadedCsv, *, accept_content_type: bool = False) -> None:
    """Raise ``InvalidFileTypeError`` unless ``upload`` looks like a CSV.

    The filename check is case-insensitive. ``accept_content_type`` also lets
    through files whose declared type is ``text/csv`` whatever their name.
    """
    if not is_csv_upload(upload, accept_content_type=accept_content_type):
        _LOG.warning("rejected upload %r (type %r)", upload.name, upload.type)
        raise InvalidFileTypeError()


def decode_csv_bytes(raw: bytes) -> str:
    # utf-8-sig drops a leading BOM; bad bytes become U+FFFD like a browser would
    return raw.decode("utf-8-sig", errors="replace")


def read_upload_text(upload: UploadedCsv, *, accept_content_type: bool = False) -> str:
    validate_csv_upload(upload, accept_content_type=accept_content_type)
    try:
        raw = upload.getvalue()
    except (OSError, ValueError) as e:
        _LOG.warning("failed to read %r: %s", upload.name, e)
        raise ReadFailureError() from e
    if raw is None:
        raise ReadFailureError()
    _LOG.debug("read %d byte(s) from %r", len(raw), upload.name)
    return decode_csv_bytes(raw)
