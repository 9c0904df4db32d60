"""Expression trees: build from postfix, print as infix, evaluate."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExprNode", "is_operator", "postfix_to_tree", "infix", "evaluate"]

_OPERATORS = frozenset("+-/*^")


@dataclass
class ExprNode:
    """A node holding an operator or an operand token."""

    value: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def is_operator(char: str) -> bool:
    """Tell whether ``char`` is one of ``+ - / * ^``."""
    return char in _OPERATORS


def postfix_to_tree(postfix: str) -> ExprNode:
    """Build a tree from a postfix string of single-character tokens.

    Raises ValueError when the expression is empty or malformed.
    """
    stack: list[ExprNode] = []
    for char in postfix:
        if not is_operator(char):
            stack.append(ExprNode(char))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(ExprNode(char, left, right))
    if len(stack) != 1:
        raise ValueError(f"malformed postfix expression {postfix!r}")
    return stack[0]


def infix(root: ExprNode | None) -> str:
    """Return the in-order reading of the tree, without parentheses."""
    if root is None:
        return ""
    return infix(root.left) + root.value + infix(root.right)


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def evaluate(root: ExprNode | None) -> int:
    """Evaluate an integer expression tree; an empty tree is 0.

    Division truncates toward zero. Raises ZeroDivisionError on division by
    zero and ValueError for an unknown operator or a non-integer leaf.
    """
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return int(root.value)
    left = evaluate(root.left)
    right = evaluate(root.right)
    match root.value:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            if right == 0:
                raise ZeroDivisionError("division by zero")
            return _truncating_divide(left, right)
        case "^":
            if right < 0:
                raise ValueError("negative exponent")
            return left**right
        case other:
            raise ValueError(f"unknown operator {other!r}")