"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of the parser, the evaluator and the command line.
"""
