"""
Calc Service - Arithmetic Expression Evaluation Service

Evaluates infix arithmetic expressions (+, -, *, / and parentheses)
submitted over HTTP or the command line. Expressions are tokenized,
converted to postfix with the shunting-yard algorithm and reduced on a
value stack.
"""

__version__ = "1.0.0"
__author__ = "Calc Service Team"
