"""
Unit tests for the SharedVariableCodegen.

Tests:
- Empty declaration list
- Each of the four generated macros
- Separator conventions
- Order preservation
"""

import pytest
from glsl_preprocess import SharedVariableCodegen, SharedVariableDeclaration as Var


@pytest.fixture
def codegen():
    """Fixture for SharedVariableCodegen instance."""
    return SharedVariableCodegen()


def macro_lines(suffix):
    """Helper: map macro name -> body from the #define lines."""
    macros = {}
    for line in suffix.splitlines():
        if line.startswith('#define '):
            _, name, body = line.split(' ', 2)
            macros[name] = body
    return macros


# ============================================================================
# Empty Case
# ============================================================================

def test_no_declarations(codegen):
    """Test nothing is emitted without shared variables."""
    assert codegen.emit([]) == ""


# ============================================================================
# Full Output
# ============================================================================

def test_two_variables_exact_output(codegen):
    """Test complete macro block for a scalar and an array."""
    result = codegen.emit([Var('float', 'foo', ''), Var('float', 'bar', '[10]')])
    assert result == (
        "#undef MSL_SHARED_VARS_ARGS\n"
        "#define MSL_SHARED_VARS_ARGS threadgroup float(&_foo),threadgroup float(&_bar)[10]\n"
        "#undef MSL_SHARED_VARS_ASSIGN\n"
        "#define MSL_SHARED_VARS_ASSIGN :foo(_foo),bar(_bar)\n"
        "#undef MSL_SHARED_VARS_DECLARE\n"
        "#define MSL_SHARED_VARS_DECLARE threadgroup float foo;threadgroup float bar[10];\n"
        "#undef MSL_SHARED_VARS_PASS\n"
        "#define MSL_SHARED_VARS_PASS (foo,bar)\n"
    )


def test_each_define_preceded_by_undef(codegen):
    """Test every macro is undefined right before being defined."""
    lines = codegen.emit([Var('int', 'a', '')]).splitlines()
    assert len(lines) == 8
    for undef, define in zip(lines[::2], lines[1::2]):
        name = undef.split(' ')[1]
        assert undef == f"#undef {name}"
        assert define.startswith(f"#define {name} ")


# ============================================================================
# Individual Macros
# ============================================================================

def test_single_variable(codegen):
    """Test no separator is emitted for a single entry."""
    macros = macro_lines(codegen.emit([Var('int', 'a', '')]))
    assert macros['MSL_SHARED_VARS_ARGS'] == "threadgroup int(&_a)"
    assert macros['MSL_SHARED_VARS_ASSIGN'] == ":a(_a)"
    assert macros['MSL_SHARED_VARS_DECLARE'] == "threadgroup int a;"
    assert macros['MSL_SHARED_VARS_PASS'] == "(a)"


def test_args_contains_array_suffix(codegen):
    """Test array suffix follows the reference parameter."""
    args = codegen.emit_args([Var('vec4', 'tile', '[16][16]')])
    assert args == "threadgroup vec4(&_tile)[16][16]"


def test_assign_leading_colon_only_once(codegen):
    """Test ':' starts the list and ',' separates the rest."""
    assign = codegen.emit_assign([Var('int', 'a'), Var('int', 'b'), Var('int', 'c')])
    assert assign == ":a(_a),b(_b),c(_c)"


def test_declare_keeps_verbatim_suffix(codegen):
    """Test declaration reuses the captured text as-is."""
    declare = codegen.emit_declare([Var('uint', 'hist', ' [BIN_COUNT]')])
    assert declare == "threadgroup uint hist [BIN_COUNT];"


def test_pass_list(codegen):
    """Test call-site argument list."""
    assert codegen.emit_pass([Var('int', 'a'), Var('int', 'b')]) == "(a,b)"


# ============================================================================
# Ordering
# ============================================================================

def test_order_preserved_in_all_macros(codegen):
    """Test alpha is listed before bravo in every macro."""
    macros = macro_lines(codegen.emit([Var('float', 'alpha', ''), Var('int', 'bravo', '[4]')]))
    assert len(macros) == 4
    for body in macros.values():
        assert body.index('alpha') < body.index('bravo')


def test_duplicate_names_not_merged(codegen):
    """Test duplicate declarations produce duplicate entries."""
    macros = macro_lines(codegen.emit([Var('float', 'a'), Var('float', 'a')]))
    assert macros['MSL_SHARED_VARS_PASS'] == "(a,a)"
