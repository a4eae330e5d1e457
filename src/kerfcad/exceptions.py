"""Exception hierarchy for kerfcad."""


class KerfCadError(Exception):
    """Base exception for all kerfcad errors."""

    pass


class CodeError(KerfCadError):
    """Errors related to feature code strings."""

    pass


class InvalidCodeError(CodeError, ValueError):
    """A feature code contains an unrecognized character or has a bad shape."""

    def __init__(self, code: str, reason: str) -> None:
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid feature code '{code}': {reason}")


class GeometryError(KerfCadError):
    """Errors in geometric calculations."""

    pass


class DegenerateGeometryError(GeometryError):
    """Requested geometry has no finite solution."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate geometry: {reason}")


class InvalidArgumentError(KerfCadError, ValueError):
    """A parameter has an unsupported value, length or shape."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class ExportError(KerfCadError, OSError):
    """Error writing a drawing to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export drawing '{path}': {reason}")
