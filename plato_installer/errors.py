from __future__ import annotations

from typing import Optional, Sequence


class InstallerError(RuntimeError):
    """Base class for failures that abort the install.

    The pipeline fills in `step_id` and `phase` (last phase reached) as the
    error leaves a step.
    """

    step_id: Optional[str] = None
    phase: Optional[str] = None


class PathMismatchError(InstallerError):
    def __init__(self, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Detected incorrect path ({actual}). "
            f"Please unarchive tarball in {expected.rstrip('/')}/"
        )


class PreconditionError(InstallerError):
    pass


class FilesystemError(InstallerError):
    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class ServiceManagerError(InstallerError):
    def __init__(
        self,
        message: str,
        *,
        argv: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.argv = list(argv or [])
        self.returncode = returncode
        self.stderr = stderr
        detail = message
        if returncode is not None:
            detail += f" (exit {returncode})"
        if stderr.strip():
            detail += f"\n{stderr.strip()}"
        super().__init__(detail)
