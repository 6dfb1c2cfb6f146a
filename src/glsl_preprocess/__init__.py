"""
glsl_preprocess - cross API GLSL source preprocessor.

Rewrites shader source so that constructs unsupported or divergent across
GPU backends are masked, annotated or turned into backend macros, and
generates the macros the Metal backend needs for threadgroup variables.
"""

from .pipeline import Preprocessor, ProcessedSource
from .config import PreprocessorOptions
from .diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    LoggingSink,
    PreprocessorError,
    RaiseOnError,
    ReportErrorFn,
    logging_sink,
    null_sink,
    offset_to_location,
    raise_on_error,
    report,
)
from .analyzer import (
    ArrayConstructorLinter,
    MatrixConstructorLinter,
    SharedVariableDeclaration,
    ThreadgroupVariableCollector,
)
from .codegen import SharedVariableCodegen
from .preprocessor import (
    ArgumentDecoratorInjector,
    ArrayConstructorRewriter,
    CommentStripper,
    DirectiveMasker,
)

__version__ = '0.1.0'

__all__ = [
    'Preprocessor',
    'ProcessedSource',
    'PreprocessorOptions',
    'Diagnostic',
    'DiagnosticCollector',
    'DiagnosticSink',
    'LoggingSink',
    'PreprocessorError',
    'RaiseOnError',
    'ReportErrorFn',
    'logging_sink',
    'null_sink',
    'offset_to_location',
    'raise_on_error',
    'report',
    'ArrayConstructorLinter',
    'MatrixConstructorLinter',
    'SharedVariableDeclaration',
    'ThreadgroupVariableCollector',
    'SharedVariableCodegen',
    'ArgumentDecoratorInjector',
    'ArrayConstructorRewriter',
    'CommentStripper',
    'DirectiveMasker',
]
