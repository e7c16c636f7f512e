"""Error hierarchy for DataYoinker.

Error layers:
- DataYoinkerError: Base class for all DataYoinker errors
- DomainError: Caller-correctable problems (400 responses)
- InfrastructureError: Storage and encoding failures (500 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class DataYoinkerError(Exception):
    """Base class for all DataYoinker errors.

    ``message`` carries the underlying cause, ``detail`` a short human label
    describing what was being attempted.
    """

    default_detail = "Error"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.detail = detail or self.default_detail
        super().__init__(message)

    def __str__(self) -> str:
        if not self.message:
            return self.detail
        return f"{self.detail} : {self.message}"


# =============================================================================
# Domain Errors (caller-correctable - 400)
# =============================================================================


class DomainError(DataYoinkerError):
    """Base class for domain/caller errors."""

    default_detail = "Bad Request"


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        code: str = "validation_error",
        detail: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message, code=code, detail=detail)
        self.field = field


# =============================================================================
# Infrastructure Errors (environment/storage failures - 500)
# =============================================================================


class InfrastructureError(DataYoinkerError):
    """Base class for infrastructure/system errors."""

    default_detail = "Internal Server Error"


class StorageError(InfrastructureError):
    """The storage backend failed to read or write."""

    def __init__(self, message: str, detail: str = "Error accessing database") -> None:
        super().__init__(message, code="storage_failure", detail=detail)


class MalformedContentError(InfrastructureError):
    """Content could not be serialized into a valid JSON document."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="malformed_content", detail="Error encoding content as JSON")


class ContentDecodeError(InfrastructureError):
    """Stored content could not be decoded. Signals store corruption."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message, code="content_decode_failure", detail="Error decoding content from JSON"
        )


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
