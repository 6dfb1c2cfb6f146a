"""
Directive Masker.

Disables preprocessor directives the backend compilers do not support by
turning them into line comments. The directive text stays in place so
tooling can still read the include graph.

Example:
    #include "deps.glsl"  ->  //include "deps.glsl"
    #pragma once          ->  //pragma once
"""

import re

DIRECTIVE_PATTERN = re.compile(
    r'^([ \t]*)#[ \t]*(include\b|pragma[ \t]+once\b)', re.MULTILINE)


class DirectiveMasker:
    """Comments out #include and #pragma once lines."""

    def transform(self, source: str) -> str:
        """
        Mask directives at the start of a line.

        Masked lines no longer start with '#', so running the pass again
        leaves them unchanged.
        """
        return DIRECTIVE_PATTERN.sub(r'\1//\2', source)
