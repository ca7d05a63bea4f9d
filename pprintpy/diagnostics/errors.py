"""Exceptions raised for caller contract violations."""

from pprintpy.diagnostics.codes import DiagnosticSpec


class DocumentError(ValueError):
    """A malformed document or printer configuration.

    Raised synchronously where the violation is detected; rendering never
    returns partial output alongside one.
    """

    def __init__(self, diagnostic: DiagnosticSpec, detail: str | None = None) -> None:
        self.diagnostic = diagnostic
        self.detail = detail
        message = f"{diagnostic.code}: {diagnostic.message}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def hint(self) -> str | None:
        return self.diagnostic.hint
