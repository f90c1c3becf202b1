"""Safe arithmetic expression calculator: tokenizer, evaluator, checked math and an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["approx", "cli", "errors", "evaluator", "numbers", "operations", "parser"]