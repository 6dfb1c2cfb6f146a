"""
Array Constructor Rewriter.

Not every backend accepts GLSL array constructors. They are rewritten into
a pair of macros the backend headers expand to the native syntax.

Example:
    = float[2](0.0, 0.0)  ->  = ARRAY_T(float) ARRAY_V(0.0, 0.0)

Only the '= Type[dims](' prefix is rewritten. The argument list and the
closing parenthesis stay untouched and become the ones of ARRAY_V(...).
"""

import re

# Assignment followed by `Type[dims](`; comparison operators are excluded
ARRAY_CONSTRUCTOR_PATTERN = re.compile(r'(?<![=!<>])=\s*(\w+)\s*\[[^\]]*\]\s*\(')


class ArrayConstructorRewriter:
    """Rewrites array constructors into ARRAY_T/ARRAY_V macro calls."""

    def transform(self, source: str) -> str:
        """Rewrite every assignment-position array constructor."""
        return ARRAY_CONSTRUCTOR_PATTERN.sub(r'= ARRAY_T(\1) ARRAY_V(', source)
