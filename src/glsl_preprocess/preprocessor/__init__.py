"""Text rewriting passes."""

from .comment_stripper import CommentStripper
from .directive_masker import DirectiveMasker
from .argument_decorator import ArgumentDecoratorInjector
from .array_constructor import ArrayConstructorRewriter

__all__ = [
    'CommentStripper',
    'DirectiveMasker',
    'ArgumentDecoratorInjector',
    'ArrayConstructorRewriter',
]
