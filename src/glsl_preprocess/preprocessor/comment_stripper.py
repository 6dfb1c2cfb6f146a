"""
Comment Stripper.

Blanks out comments so the following regex passes never match inside them.

Every comment character is replaced by a space, except newlines which are
kept as-is. Line numbers and the column of every remaining character are
therefore unchanged, which keeps later diagnostics meaningful.

Example:
    "a; /* x */ b; // c\n" -> "a;            b;\n"
"""

import re

from ..diagnostics import Diagnostic, ReportErrorFn, report

MALFORMED_BLOCK_COMMENT = "Malformed multi-line comment."
MALFORMED_LINE_COMMENT = "Malformed single line comment, missing newline."

# Spaces right before a newline make the subsequent regex passes much slower
TRAILING_SPACES = re.compile(r' +\n')


class CommentStripper:
    """
    Replaces block and line comments with whitespace.

    Block comments are stripped first, each one from its '/*' up to the
    next '*/'. Line comments are stripped afterwards up to (not including)
    their newline. An unterminated comment is reported and the partially
    stripped text is returned as-is.
    """

    def transform(self, source: str, report_error: ReportErrorFn) -> str:
        """
        Strip all comments from the source.

        Args:
            source: GLSL source code string
            report_error: Diagnostic sink for malformed comments

        Returns:
            Source with comment contents blanked out
        """
        chars = list(source)

        # Block comments
        end = 0
        while True:
            start = source.find('/*', end)
            if start == -1:
                break
            end = source.find('*/', start + 2)
            if end == -1:
                report(report_error, Diagnostic(MALFORMED_BLOCK_COMMENT, '', source, start))
                return ''.join(chars)
            end += 2
            self._blank(chars, start, end)

        # Line comments, searched in the text without block comments
        stripped = ''.join(chars)
        end = 0
        while True:
            start = stripped.find('//', end)
            if start == -1:
                break
            end = stripped.find('\n', start + 2)
            if end == -1:
                report(report_error, Diagnostic(MALFORMED_LINE_COMMENT, '', source, start))
                return ''.join(chars)
            self._blank(chars, start, end)

        return TRAILING_SPACES.sub('\n', ''.join(chars))

    @staticmethod
    def _blank(chars: list, start: int, end: int) -> None:
        """Replace chars[start:end] with spaces, keeping newlines."""
        for i in range(start, end):
            if chars[i] != '\n':
                chars[i] = ' '
