"""rc2po exception hierarchy.

Only preconditions that abort a whole run are exceptions. Per-entry problems
are reported as ConversionWarning records instead.

Python 3.13+.
"""

from pathlib import Path


class Rc2PoError(Exception):
    """Base exception for all rc2po errors."""


class InputDirectoryError(Rc2PoError):
    """Input or output path is missing or not a directory.

    Attributes:
        path: The offending path
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize InputDirectoryError.

        Args:
            path: Path that does not name an existing directory
        """
        self.path = Path(path)
        super().__init__(f"Directory not found: {self.path}")


class ReferenceLocaleNotFoundError(Rc2PoError):
    """No resource script exists for the reference locale.

    Raised before any output file is touched.

    Attributes:
        locale: Reference locale code that was looked up
        directory: Directory that was searched
    """

    def __init__(self, locale: str, directory: Path | str | None = None) -> None:
        """Initialize ReferenceLocaleNotFoundError.

        Args:
            locale: Reference locale code
            directory: Directory that was searched (optional)
        """
        self.locale = locale
        self.directory = Path(directory) if directory is not None else None
        super().__init__(f"Language {locale} not found! Check the input-path.")
