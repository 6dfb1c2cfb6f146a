"""
Constructor Linters.

Advisory scans for constructor syntax that does not behave the same on
every backend. They only report through the diagnostic sink and never
modify the source.

Pattern matching instead of parsing means some invalid usages are missed
and some valid ones are flagged. Backend compilation catches the rest.
"""

import re

from ..diagnostics import Diagnostic, ReportErrorFn, report
from ..preprocessor.array_constructor import ARRAY_CONSTRUCTOR_PATTERN

MATRIX_CONSTRUCTOR_MESSAGE = (
    "Matrix constructor is not cross API compatible. "
    "Use to_floatNxM to reshape the matrix or use other constructors instead.")

ARRAY_CONSTRUCTOR_MESSAGE = (
    "Array constructor is not cross API compatible. "
    "Use type_array instead of type[].")

# Matrix type called with one argument without digits, e.g. `mat4(other_mat)`
# or `mat3(transpose(m))`; lazy so `mat3(a) * mat4(b)` gives two matches
MATRIX_CONSTRUCTOR_PATTERN = re.compile(
    r'\b(mat\d(?:x\d)?|float\dx\d)\([^,\s\d]+?\)')


class ConstructorLinter:
    """Reports every match of `pattern` with a fixed message."""

    pattern: re.Pattern = None
    message: str = ''

    def lint(self, source: str, report_error: ReportErrorFn) -> int:
        """
        Scan the source and report each match.

        Args:
            source: Comment-stripped GLSL source
            report_error: Diagnostic sink

        Returns:
            Number of reports issued
        """
        count = 0
        for match in self.pattern.finditer(source):
            report(report_error, Diagnostic(
                self.message, match.group(0), source, match.start()))
            count += 1
        return count


class MatrixConstructorLinter(ConstructorLinter):
    """Flags matrix-from-matrix constructors such as `mat3(model)`."""
    pattern = MATRIX_CONSTRUCTOR_PATTERN
    message = MATRIX_CONSTRUCTOR_MESSAGE


class ArrayConstructorLinter(ConstructorLinter):
    """Flags `Type[N](...)` array constructors."""
    pattern = ARRAY_CONSTRUCTOR_PATTERN
    message = ARRAY_CONSTRUCTOR_MESSAGE
