"""
Argument Decorator Injector.

Surrounds the name of every qualified declaration with boundary markers so
backend macros can locate the identifier whatever its type is.

Example:
    out float var[2]  ->  out float _out_sta var _out_end[2]

Each qualifier gets its own marker pair (_in_sta/_in_end,
_out_sta/_out_end, _inout_sta/_inout_end, _shared_sta/_shared_end).
"""

import re

QUALIFIERS = ('out', 'inout', 'in', 'shared')

QUALIFIED_DECLARATION = re.compile(
    r'\b(' + '|'.join(QUALIFIERS) + r')\s+(\w+)\s+(\w+)')


def start_marker(qualifier: str) -> str:
    """Marker token placed before the identifier."""
    return f'_{qualifier}_sta'


def end_marker(qualifier: str) -> str:
    """Marker token placed after the identifier."""
    return f'_{qualifier}_end'


class ArgumentDecoratorInjector:
    """Injects start/end markers around qualified identifiers."""

    def transform(self, source: str) -> str:
        """
        Decorate all `<qualifier> <type> <name>` sequences.

        Array brackets following the name are left after the end marker.
        """
        def decorate(match):
            qualifier, type_name, name = match.groups()
            return (f'{qualifier} {type_name} {start_marker(qualifier)} '
                    f'{name} {end_marker(qualifier)}')

        return QUALIFIED_DECLARATION.sub(decorate, source)
