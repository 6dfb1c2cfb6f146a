"""
Shader Source Preprocessor.

Mutates GLSL into cross API source that the different GPU backends can
interpret. Some constructs are rewritten, others are only reported as
incompatible.

Architecture:
    source -> CommentStripper -> ThreadgroupVariableCollector
           -> MatrixConstructorLinter -> ArrayConstructorLinter
           -> DirectiveMasker -> ArgumentDecoratorInjector
           -> ArrayConstructorRewriter -> body
    body + SharedVariableCodegen(shared vars) -> output

Design:
- Every pass works on the whole source string
- Passes only communicate through the text and the collected shared variables
- The shared variable list lives for one run, so an instance can be reused
- Problems go to the caller's sink, the pipeline itself never raises

Usage:
    preprocessor = Preprocessor()
    output = preprocessor.process(source, report_error)
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .analyzer import (
    ArrayConstructorLinter,
    MatrixConstructorLinter,
    SharedVariableDeclaration,
    ThreadgroupVariableCollector,
)
from .codegen import SharedVariableCodegen
from .config import PreprocessorOptions
from .diagnostics import ReportErrorFn, null_sink
from .preprocessor import (
    ArgumentDecoratorInjector,
    ArrayConstructorRewriter,
    CommentStripper,
    DirectiveMasker,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedSource:
    """
    Result of one preprocessor run.

    Attributes:
        body: Source after all mutating passes
        shared_vars: Shared declarations, in source order
        suffix: Generated macro block ('' without shared variables)
        options: Options the run was made with
    """
    body: str
    shared_vars: List[SharedVariableDeclaration] = field(default_factory=list)
    suffix: str = ''
    options: PreprocessorOptions = field(default_factory=PreprocessorOptions)

    @property
    def text(self) -> str:
        """
        Final output: body followed by the macro block.

        Unlike plain concatenation, a newline is inserted when the body does
        not end with one, so the first #undef never lands on the last
        source line.
        """
        if not self.suffix:
            return self.body
        if self.body and not self.body.endswith('\n'):
            return self.body + '\n' + self.suffix
        return self.body + self.suffix


class Preprocessor:
    """
    Runs the fixed sequence of preprocessing passes.

    The instance only holds stateless pass objects and can be shared between
    threads, provided every call gets its own sink.
    """

    def __init__(self):
        """Initialize the passes."""
        self.comment_stripper = CommentStripper()
        self.collector = ThreadgroupVariableCollector()
        self.linters = [
            MatrixConstructorLinter(),
            ArrayConstructorLinter(),
        ]
        # Applied in order
        self.mutations = [
            DirectiveMasker(),
            ArgumentDecoratorInjector(),
            ArrayConstructorRewriter(),
        ]
        self.codegen = SharedVariableCodegen()

    def run(self, source: str,
            report_error: ReportErrorFn = null_sink,
            options: Optional[PreprocessorOptions] = None) -> ProcessedSource:
        """
        Run all passes over one source file.

        Args:
            source: Whole GLSL source file
            report_error: Sink called as report_error(source, matched_text, message)
            options: Feature flags (defaults to PreprocessorOptions())

        Returns:
            ProcessedSource with the mutated body and the generated suffix
        """
        options = options or PreprocessorOptions()

        text = self.comment_stripper.transform(source, report_error)
        shared_vars = self.collector.collect(text)

        for linter in self.linters:
            linter.lint(text, report_error)

        for mutation in self.mutations:
            text = mutation.transform(text)

        suffix = self.codegen.emit(shared_vars)
        logger.debug("Collected %d shared variable(s), suffix of %d chars",
                     len(shared_vars), len(suffix))

        return ProcessedSource(
            body=text,
            shared_vars=shared_vars,
            suffix=suffix,
            options=options,
        )

    def process(self, source: str, report_error: ReportErrorFn,
                do_linting: bool = False,
                do_string_mutation: bool = False,
                do_include_mutation: bool = False) -> str:
        """
        Take a whole source file and return the processed source.

        Args:
            source: Whole GLSL source file
            report_error: Sink called as report_error(source, matched_text, message)
            do_linting: Reserved, see PreprocessorOptions
            do_string_mutation: Reserved, see PreprocessorOptions
            do_include_mutation: Reserved, see PreprocessorOptions

        Returns:
            Processed source followed by the shared variable macros
        """
        options = PreprocessorOptions(
            do_linting=do_linting,
            do_string_mutation=do_string_mutation,
            do_include_mutation=do_include_mutation,
        )
        return self.run(source, report_error, options).text

    def process_python(self, source: str) -> str:
        """Variant used for shaders authored from Python scripts. Reports are dropped."""
        return self.process(source, null_sink)
