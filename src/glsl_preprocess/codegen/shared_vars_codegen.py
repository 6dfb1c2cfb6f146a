"""
Shared Variable Codegen.

Generates the macros the Metal backend uses to hoist `shared` variables
into the entry point function.

Threadgroup memory cannot be declared at global scope in Metal. The shader
source is wrapped by the backend in a class whose members are references to
threadgroup memory blocks declared inside the entry point. Every piece of
that wrapper depending on the shader is stored in a macro so no string
replacement is needed at shader compile time:

    // Source
    shared float foo;
    shared float bar[10];

    // Backend output
    class Wrapper {
    threadgroup float (&foo);
    threadgroup float (&bar)[10];
    // Rest of the source ...
    Wrapper(
      threadgroup float(&_foo),threadgroup float(&_bar)[10]  // MSL_SHARED_VARS_ARGS
    ) :foo(_foo),bar(_bar)                                   // MSL_SHARED_VARS_ASSIGN
    {}
    };

    kernel void entry_point() {
      threadgroup float foo;threadgroup float bar[10];       // MSL_SHARED_VARS_DECLARE
      Wrapper wrapper (foo,bar);                             // MSL_SHARED_VARS_PASS
    }
"""

from typing import List

from ..analyzer.threadgroup_collector import SharedVariableDeclaration

# Arguments of the wrapper class constructor
ARGS_MACRO = 'MSL_SHARED_VARS_ARGS'
# Reference assignments in the wrapper constructor initializer list
ASSIGN_MACRO = 'MSL_SHARED_VARS_ASSIGN'
# Threadgroup declarations inside the entry point
DECLARE_MACRO = 'MSL_SHARED_VARS_DECLARE'
# Arguments of the wrapper constructor call
PASS_MACRO = 'MSL_SHARED_VARS_PASS'


class SharedVariableCodegen:
    """
    Emits the MSL_SHARED_VARS_* macro block.

    Usage:
        codegen = SharedVariableCodegen()
        suffix = codegen.emit(declarations)
    """

    def emit(self, declarations: List[SharedVariableDeclaration]) -> str:
        """
        Generate the macro definitions for the given declarations.

        Args:
            declarations: Shared declarations in source order

        Returns:
            Newline-terminated macro block, or '' when there is nothing to hoist
        """
        if not declarations:
            return ""

        macros = [
            (ARGS_MACRO, self.emit_args(declarations)),
            (ASSIGN_MACRO, self.emit_assign(declarations)),
            (DECLARE_MACRO, self.emit_declare(declarations)),
            (PASS_MACRO, self.emit_pass(declarations)),
        ]

        # Each #define directly follows its own #undef
        lines = []
        for name, body in macros:
            lines.append(f"#undef {name}")
            lines.append(f"#define {name} {body}")
        return '\n'.join(lines) + '\n'

    def emit_args(self, declarations: List[SharedVariableDeclaration]) -> str:
        """Reference parameters: `threadgroup float(&_foo),...`."""
        return ','.join(
            f"threadgroup {var.type}(&_{var.name}){var.array}"
            for var in declarations
        )

    def emit_assign(self, declarations: List[SharedVariableDeclaration]) -> str:
        """Initializer list: `:foo(_foo),bar(_bar)`."""
        return ':' + ','.join(f"{var.name}(_{var.name})" for var in declarations)

    def emit_declare(self, declarations: List[SharedVariableDeclaration]) -> str:
        """Local declarations: `threadgroup float foo;...`."""
        return ''.join(
            f"threadgroup {var.type} {var.name}{var.array};"
            for var in declarations
        )

    def emit_pass(self, declarations: List[SharedVariableDeclaration]) -> str:
        """Call arguments: `(foo,bar)`."""
        return '(' + ','.join(var.name for var in declarations) + ')'
