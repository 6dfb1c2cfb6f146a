"""
Threadgroup Variable Collector.

Finds `shared` (threadgroup memory) declarations in comment-stripped source.

Metal does not allow threadgroup memory at global scope: those variables
have to be declared inside the entry point and passed by reference to the
rest of the shader. The collected declarations feed SharedVariableCodegen,
which generates the macros doing that.

Example:
    shared float foo;      -> SharedVariableDeclaration('float', 'foo', '')
    shared int bar[4];     -> SharedVariableDeclaration('int', 'bar', '[4]')
"""

import re
from dataclasses import dataclass
from typing import List

SHARED_DECLARATION = re.compile(r'\bshared\s+(\w+)\s+(\w+)([^;]*);')


@dataclass(frozen=True)
class SharedVariableDeclaration:
    """
    A `shared` declaration found in the source.

    Attributes:
        type: Declared type name (e.g. 'float', 'vec4')
        name: Variable name
        array: Everything between the name and ';', verbatim (e.g. '[10]')
    """
    type: str
    name: str
    array: str = ''


class ThreadgroupVariableCollector:
    """
    Collects shared variable declarations in order of appearance.

    The order is significant: the generated macro argument lists must line
    up positionally with the wrapper the backend builds around the shader.
    No deduplication is done.
    """

    def collect(self, source: str) -> List[SharedVariableDeclaration]:
        """
        Scan the source for shared declarations.

        Args:
            source: Comment-stripped GLSL source

        Returns:
            New list of declarations, left to right
        """
        return [
            SharedVariableDeclaration(*match.groups())
            for match in SHARED_DECLARATION.finditer(source)
        ]
