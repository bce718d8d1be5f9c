"""Systems-programming building blocks: a dynamic array, word counting, big hex integers and Fibonacci."""

__version__ = "1.0.0"