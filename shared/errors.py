"""
Error hierarchy for ZIP Population Coverage.
"""


class CoverageError(Exception):
    """Base error for coverage operations."""


class ZipNotFoundError(CoverageError):
    """Requested ZIP code is not present in the dataset.

    Attributes:
        zip_code: The ZIP code that was looked up
    """

    def __init__(self, zip_code: str) -> None:
        self.zip_code = zip_code
        super().__init__(f"ZIP not found: {zip_code}")


class DatasetLoadError(CoverageError):
    """ZIP data file is malformed or violates the record schema."""


class DatasetMissingError(DatasetLoadError):
    """ZIP data file does not exist."""
