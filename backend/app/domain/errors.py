"""Error kinds surfaced by the scanner, aggregator and writer."""


class ServiceDirectoryError(Exception):
    """Base error with a stable kind and the HTTP status it maps to."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DirectoryReadError(ServiceDirectoryError):
    """Raised when the configuration directory cannot be listed."""

    kind = "directory_read_error"
    status_code = 500


class FileParseError(ServiceDirectoryError):
    """One YAML file could not be read or parsed. Recovered by the scanner."""

    kind = "file_parse_error"
    status_code = 500


class ServiceValidationError(ServiceDirectoryError):
    kind = "validation_error"
    status_code = 400


class DuplicateServiceError(ServiceDirectoryError):
    kind = "duplicate_service"
    status_code = 400


class WriteError(ServiceDirectoryError):
    kind = "write_error"
    status_code = 500
