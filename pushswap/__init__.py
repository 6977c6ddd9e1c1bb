"""Sort distinct integers with two stacks and a fixed set of operations, recording each operation used."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]