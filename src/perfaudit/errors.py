"""Exception types raised by the analysis engine."""


class PerfAuditError(Exception):
    """Base class for all perfaudit failures."""


class InvalidInput(PerfAuditError, ValueError):
    """A caller handed the engine a value outside its contract (e.g. a negative size)."""


class AnalysisError(PerfAuditError):
    """An analyzer could not scan the input it was given."""

    def __init__(self, analyzer: str, message: str) -> None:
        self.analyzer = analyzer
        super().__init__(f"{analyzer} failed: {message}")
