"""Lexer, syntax tree, runtime values and evaluator for the Crow language."""

__version__ = "0.1.0"
__all__ = ["ast", "environment", "evaluator", "lexer", "logger", "objects", "tokens"]