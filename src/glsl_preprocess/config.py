"""Options of a preprocessor run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PreprocessorOptions:
    """
    Feature flags for a Preprocessor run.

    The flags are reserved for toggling linting and the string/include
    mutations independently. They are recorded on the result but do not
    change the output yet.

    Attributes:
        do_linting: Run the constructor linters
        do_string_mutation: Apply string mutations
        do_include_mutation: Mask include directives
    """
    do_linting: bool = False
    do_string_mutation: bool = False
    do_include_mutation: bool = False
