"""Non-mutating scans over the stripped source."""

from .threadgroup_collector import SharedVariableDeclaration, ThreadgroupVariableCollector
from .constructor_linter import (
    ArrayConstructorLinter,
    MatrixConstructorLinter,
    ARRAY_CONSTRUCTOR_MESSAGE,
    MATRIX_CONSTRUCTOR_MESSAGE,
)

__all__ = [
    'SharedVariableDeclaration',
    'ThreadgroupVariableCollector',
    'ArrayConstructorLinter',
    'MatrixConstructorLinter',
    'ARRAY_CONSTRUCTOR_MESSAGE',
    'MATRIX_CONSTRUCTOR_MESSAGE',
]
