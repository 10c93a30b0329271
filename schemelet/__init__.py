"""A small Scheme interpreter: tokenizer, parser, evaluator and command-line runner."""

__version__ = "0.1.0"
__all__ = ["values", "tokenizer", "parser", "primitives", "evaluator", "interpreter"]