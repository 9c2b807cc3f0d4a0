"""
geocodes Exception Hierarchy.

Two families of failures are raised by the package:

    - Load errors: reference data is missing or malformed at first access.
      These are fatal for the triggering call and are never retried.
    - Country errors: a whole-country operation was asked for a country that
      does not exist, or that has no subdivision data.

A missing individual record is not an error; lookups return None instead.

Exception Severity Levels:
    - FATAL: Data or configuration is unusable, nothing can be looked up
    - CRITICAL: Reserved for callers wrapping geocodes errors
    - RECOVERABLE: Caller usage error, other lookups still work
    - WARNING: Non-critical issue, log and continue

Author: Daniel Edge
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorSeverity(Enum):
    """
    Classify error severity for handling decisions.

    Attributes:
        FATAL: Unrecoverable error, reference data cannot be used
        CRITICAL: Stop the current operation
        RECOVERABLE: Caller error, continue with other lookups
        WARNING: Non-critical issue, log and continue
    """
    FATAL = "fatal"
    CRITICAL = "critical"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class GeocodesException(Exception):
    """
    Base exception for all geocodes errors with structured context.

    Attributes:
        message (str): Human-readable error message
        severity (ErrorSeverity): Error severity level
        details (Dict[str, Any]): Additional context (file path, country code, etc.)
        original_exception (Optional[Exception]): Original exception if wrapping

    Example:
        >>> try:
        ...     table = yaml.safe_load(handle)
        ... except yaml.YAMLError as e:
        ...     raise GeocodesException(
        ...         "Could not parse countries table",
        ...         severity=ErrorSeverity.FATAL,
        ...         details={'file_path': 'data/countries.yml'},
        ...         original_exception=e
        ...     )
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.RECOVERABLE,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize geocodes exception.

        Args:
            message: Human-readable error description
            severity: Error severity level (default: RECOVERABLE)
            details: Additional context dictionary
            original_exception: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for logging/reporting.

        Returns:
            Dictionary containing exception details suitable for JSON serialization
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'severity': self.severity.value,
            'details': self.details,
            'original_error': str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Configuration Errors (Fatal)
# ============================================================================

class ConfigError(GeocodesException):
    """
    Configuration errors (fatal).

    Raised when:
    - Configuration file not found or too large
    - Invalid YAML syntax
    - Unknown configuration fields

    Attributes:
        field (Optional[str]): Specific config field that caused error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'field': field} if field else {}
        )
        self.field = field


# ============================================================================
# Data Loading Errors (Fatal)
# ============================================================================

class DataLoadError(GeocodesException):
    """
    Reference data could not be loaded.

    Raised when:
    - The countries file is missing
    - A data file is not valid YAML
    - A data file is not a list of [name, code] rows
    - A data file cannot be read (permissions, encoding issues)

    Failed loads are not cached, so the next access tries again from disk.

    Attributes:
        file_path (str): Path to file that failed to load

    Example:
        >>> raise DataLoadError(
        ...     "Row 3 is not a [name, code] pair",
        ...     file_path="data/states/US.yml"
        ... )
    """

    def __init__(
        self,
        message: str,
        file_path: str,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize data load error.

        Args:
            message: Error description
            file_path: Path to file being loaded
            original_exception: Original exception from the parser or OS
        """
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'file_path': file_path},
            original_exception=original_exception
        )
        self.file_path = file_path


class ReferenceFileNotFoundError(DataLoadError):
    """
    Data file not found at the expected path.

    Example:
        >>> raise ReferenceFileNotFoundError(
        ...     "data/countries.yml",
        ...     searched_paths=["data/countries.yml", "data/countries.yaml"]
        ... )
    """

    def __init__(self, file_path: str, searched_paths: Optional[list] = None):
        message = f"Reference data file not found: {file_path}"
        if searched_paths:
            message += f"\nSearched: {', '.join(searched_paths)}"

        super().__init__(message, file_path)
        self.details['searched_paths'] = searched_paths or []


class DataFileSizeError(DataLoadError):
    """Data file exceeds the maximum size accepted by the loader."""

    def __init__(self, file_path: str, file_size: int, max_size: int):
        super().__init__(
            f"Reference data file too large: {file_size:,} bytes. "
            f"Maximum allowed: {max_size:,} bytes",
            file_path
        )
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


# ============================================================================
# Country Errors (Recoverable)
# ============================================================================

class CountryError(GeocodesException):
    """
    A whole-country operation could not be served.

    Attributes:
        country_code (str): The country code the caller asked for
    """

    def __init__(self, message: str, country_code: Any):
        super().__init__(
            message,
            severity=ErrorSeverity.RECOVERABLE,
            details={'country_code': country_code}
        )
        self.country_code = country_code


class NonexistentCountry(CountryError):
    """
    Country code is not present in the country table.

    Example:
        >>> states('ZZ')
        Traceback (most recent call last):
        ...
        NonexistentCountry: Country 'ZZ' does not exist
    """

    def __init__(self, country_code: Any):
        super().__init__(f"Country {country_code!r} does not exist", country_code)


class StatesNotSupported(CountryError):
    """
    Country exists but has no subdivision data.

    Example:
        >>> states('AQ')
        Traceback (most recent call last):
        ...
        StatesNotSupported: States are not supported for country 'AQ'
    """

    def __init__(self, country_code: Any):
        super().__init__(
            f"States are not supported for country {country_code!r}",
            country_code
        )
