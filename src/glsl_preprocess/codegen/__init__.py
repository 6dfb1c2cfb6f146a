"""Code generation for backend support macros."""

from .shared_vars_codegen import (
    SharedVariableCodegen,
    ARGS_MACRO,
    ASSIGN_MACRO,
    DECLARE_MACRO,
    PASS_MACRO,
)

__all__ = [
    'SharedVariableCodegen',
    'ARGS_MACRO',
    'ASSIGN_MACRO',
    'DECLARE_MACRO',
    'PASS_MACRO',
]
