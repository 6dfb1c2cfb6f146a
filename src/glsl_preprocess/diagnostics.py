"""
Diagnostics - error reporting contract of the preprocessor passes.

Every pass that detects a problem reports it through a caller-supplied sink
with the signature:

    report_error(source: str, matched_text: str, message: str) -> None

The passes never inspect the return value and never change their control
flow based on what the sink does. Whether a report is ignored, logged,
collected or turned into an exception is decided entirely by the caller.

Sinks deriving from DiagnosticSink receive the whole Diagnostic instead,
including the offset of the match, so they can point at the exact line.

This module provides the ready-made sinks:
- null_sink: ignore everything (used for Python authored shaders)
- logging_sink: forward to the package logger at WARNING level
- raise_on_error: raise PreprocessorError on the first report
- DiagnosticCollector: accumulate Diagnostic values for later inspection
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

ReportErrorFn = Callable[[str, str, str], None]


class PreprocessorError(Exception):
    """Raised by strict sinks when a pass reports a problem."""
    def __init__(self, message: str, location: Optional[tuple] = None):
        self.message = message
        self.location = location
        if location:
            line, col = location
            super().__init__(f"{message} at line {line+1}, column {col+1}")
        else:
            super().__init__(message)


def offset_to_location(text: str, offset: int) -> Tuple[int, int]:
    """
    Convert a character offset into a 0-based (line, column) pair.

    Args:
        text: Source text the offset points into
        offset: Character offset (clamped to the text length)

    Returns:
        Tuple of (line, column)
    """
    offset = max(0, min(offset, len(text)))
    line = text.count('\n', 0, offset)
    line_start = text.rfind('\n', 0, offset) + 1
    return line, offset - line_start


@dataclass(frozen=True)
class Diagnostic:
    """
    A single report produced by one of the passes.

    Attributes:
        message: Fixed explanatory message of the pass
        matched_text: Text that triggered the report (empty for whole-file issues)
        source: Full text the pass was scanning when it reported
        offset: Position of the report in source, when the pass knows it
    """
    message: str
    matched_text: str = ''
    source: str = ''
    offset: Optional[int] = None

    @property
    def location(self) -> Optional[Tuple[int, int]]:
        """0-based (line, column) of the report, None without an offset."""
        if self.offset is None:
            return None
        return offset_to_location(self.source, self.offset)

    def to_error(self) -> PreprocessorError:
        """Build the exception equivalent of this diagnostic."""
        return PreprocessorError(self.message, self.location)

    def __str__(self) -> str:
        text = self.message
        if self.matched_text:
            text += f" [{self.matched_text}]"
        location = self.location
        if location is None:
            return text
        line, col = location
        return f"{line+1}:{col+1}: {text}"


class DiagnosticSink:
    """
    Sink receiving complete Diagnostic values.

    Instances can still be called with the plain (source, matched_text,
    message) signature, in which case the offset is unknown.
    """

    def __call__(self, source: str, matched_text: str, message: str) -> None:
        self.report_diagnostic(Diagnostic(message, matched_text, source))

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        raise NotImplementedError


def report(report_error: ReportErrorFn, diagnostic: Diagnostic) -> None:
    """
    Deliver a diagnostic to any kind of sink.

    DiagnosticSink instances get the Diagnostic itself, plain callables get
    (source, matched_text, message).
    """
    if isinstance(report_error, DiagnosticSink):
        report_error.report_diagnostic(diagnostic)
    else:
        report_error(diagnostic.source, diagnostic.matched_text, diagnostic.message)


def null_sink(source: str, matched_text: str, message: str) -> None:
    """Ignore all reports."""


class LoggingSink(DiagnosticSink):
    """Log every report as a warning."""

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic)


class RaiseOnError(DiagnosticSink):
    """Turn the first report into a PreprocessorError."""

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        raise diagnostic.to_error()


logging_sink = LoggingSink()
raise_on_error = RaiseOnError()


class DiagnosticCollector(DiagnosticSink):
    """
    Sink that accumulates every report as a Diagnostic.

    Usage:
        collector = DiagnosticCollector()
        Preprocessor().process(source, collector)
        for diagnostic in collector:
            print(diagnostic)
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    @property
    def messages(self) -> List[str]:
        """Messages of all collected diagnostics, in report order."""
        return [d.message for d in self.diagnostics]

    def clear(self) -> None:
        """Forget all collected diagnostics."""
        self.diagnostics.clear()
