"""Exceptions raised by the short link core.

Every error carries an ``error_code`` for API clients and the HTTP
``status_code`` the application maps it to.

Classes:
    ShortenerError:
        Base class for all application-specific errors.

    ValidationError, MalformedURLError, UnsupportedSchemeError, DisallowedHostError:
        The candidate long URL was rejected. Client errors.

    RepositoryError, DuplicateSlugError, DuplicateLongURLError, NotFoundError, StorageError:
        Raised by URL repositories.

    SlugExhaustedError:
        No free slug was found within the retry bound.
"""


class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = "app:shortener_error"
    status_code = 500


class ValidationError(ShortenerError):
    """Base exception for rejected long URLs."""

    error_code = "validation:invalid_url"
    status_code = 400


class MalformedURLError(ValidationError):
    """Raised when the input is not a syntactically valid absolute URL."""

    error_code = "validation:malformed_url"


class UnsupportedSchemeError(ValidationError):
    """Raised when the URL scheme is neither http nor https."""

    error_code = "validation:unsupported_scheme"


class DisallowedHostError(ValidationError):
    """Raised when the URL points at a loopback host."""

    error_code = "validation:disallowed_host"


class RepositoryError(ShortenerError):
    """Base exception for URL repository errors."""

    error_code = "repository:error"


class DuplicateSlugError(RepositoryError):
    """Raised when a slug (or its short URL) is already taken."""

    error_code = "repository:duplicate_slug"


class DuplicateLongURLError(RepositoryError):
    """Raised when a live mapping already exists for the long URL."""

    error_code = "repository:duplicate_long_url"
    status_code = 409


class NotFoundError(RepositoryError):
    """Raised when no live mapping matches."""

    error_code = "repository:not_found"
    status_code = 404


class StorageError(RepositoryError):
    """Raised when the underlying store fails (I/O, locking, corruption, etc.)."""

    error_code = "repository:storage_error"


class SlugExhaustedError(ShortenerError):
    """Raised when every generated slug collided with an existing one."""

    error_code = "generator:slug_exhausted"
