# src/staffrec/errors.py
from __future__ import annotations


class StaffingError(ValueError):
    """
    Base class for user-recoverable errors.
    `message` is the text shown in the UI.
    """

    message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


# Single-record validation
class InvalidAreaError(StaffingError):
    message = "Enter a valid square footage (> 0)"


class InvalidFootfallError(StaffingError):
    message = "Enter a valid mall footfall (>= 0)"


# Batch workflow preconditions
class EmptyBatchError(StaffingError):
    message = "Upload a CSV first (headers: square_footage,mall_footfall optional store_id)."


class NoResultsError(StaffingError):
    message = "No batch results to download"


class CSVParseError(StaffingError):
    message = "Failed to parse CSV"


__all__ = [
    "StaffingError",
    "InvalidAreaError",
    "InvalidFootfallError",
    "EmptyBatchError",
    "NoResultsError",
    "CSVParseError",
]
