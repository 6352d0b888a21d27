"""Exceptions raised by the trash and restore operations."""

PERMISSION_HINT = (
    "The operating system may require elevated filesystem access to restore "
    "from the Trash. On macOS, enable Full Disk Access for this app in "
    "System Settings > Privacy & Security > Full Disk Access, "
    "or restore the file manually from the Trash."
)


class TrashError(Exception):
    """Base exception for trash and restore errors."""


class DisposalFailedError(TrashError):
    """Raised when the system trash refuses to take a file.

    Attributes:
        path: Path that could not be moved to the trash.
        cause: Underlying exception from the trash primitive.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to move {path} to trash: {cause}")


class RestoreFailedError(TrashError):
    """Raised when moving a file back out of the trash fails.

    Attributes:
        path: Destination the file was being restored to.
        cause: Underlying OS error.
    """

    def __init__(self, path: str, cause: OSError, message: str | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message or f"Failed to restore {path}: {cause}")


class RestorePermissionError(RestoreFailedError):
    """Raised when a restore is denied by filesystem permissions."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(
            path,
            cause,
            f"Permission denied restoring {path} from Trash. {PERMISSION_HINT}",
        )
