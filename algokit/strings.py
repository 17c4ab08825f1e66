"""String puzzles: palindromes, brackets, versions, infix arithmetic and scoring."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sequence
from itertools import pairwise, zip_longest

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_BRACKETS = {")": "(", "]": "[", "}": "{"}
_VOWELS = frozenset("aeiou")
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2}
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _trunc_div,
    "%": _trunc_mod,
}


def is_palindrome(s: str) -> bool:
    """True when the ASCII letters and digits read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return cleaned == cleaned[::-1]


def compare_version(version1: str, version2: str) -> int:
    """1, -1 or 0 as ``version1`` is newer, older or the same as ``version2``.

    Empty revisions are skipped and missing ones count as 0.
    """
    revisions1 = [_atoi(part) for part in version1.split(".") if part]
    revisions2 = [_atoi(part) for part in version2.split(".") if part]
    for x, y in zip_longest(revisions1, revisions2, fillvalue=0):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def reverse_prefix(word: str, ch: str) -> str:
    """``word`` with its prefix up to the first ``ch`` reversed; unchanged without one."""
    index = word.find(ch)
    if index < 0:
        return word
    return word[index::-1] + word[index + 1 :]


def _operation_sign(operation: str) -> int:
    head = operation[:2]
    if "+" in head:
        return 1
    if "-" in head:
        return -1
    return 0


def final_value_after_operations(operations: Sequence[str]) -> int:
    """Value of X, starting at 0, after each ``++X``/``X++``/``--X``/``X--``."""
    return sum(_operation_sign(operation) for operation in operations)


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket in ``s`` is closed in the right order."""
    if len(s) % 2:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif stack and _BRACKETS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def to_postfix(infix: str) -> str:
    """Infix expression of single-character operands turned into postfix.

    Characters that are neither operands, operators nor parentheses are ignored.
    """
    output: list[str] = []
    stack = ["("]
    for ch in infix + ")":
        if ch == "(":
            stack.append(ch)
        elif _is_ascii_alnum(ch):
            output.append(ch)
        elif ch == ")":
            while True:
                if not stack:
                    raise ValueError("unbalanced ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif ch in _PRECEDENCE:
            if not stack:
                raise ValueError("operator after the expression was closed")
            while stack[-1] != "(" and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[ch]:
                output.append(stack.pop())
            stack.append(ch)
    return "".join(output)


def calculate(s: str) -> int:
    """Value of an infix expression of single digits, with C-style ``/`` and ``%``."""
    stack: list[int] = []
    for token in to_postfix(s):
        if token.isdigit():
            stack.append(int(token))
            continue
        operation = _OPERATIONS.get(token)
        if operation is None:
            raise ValueError(f"cannot evaluate operand {token!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} is missing an operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def score_of_string(s: str) -> int:
    """Sum of absolute differences between the codes of adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def is_valid_word(word: str) -> bool:
    """At least 3 ASCII letters or digits, with a vowel and a consonant among them."""
    if len(word) < 3 or not all(_is_ascii_alnum(ch) for ch in word):
        return False
    letters = [ch.lower() for ch in word if ch.isalpha()]
    has_vowel = any(ch in _VOWELS for ch in letters)
    has_consonant = any(ch not in _VOWELS for ch in letters)
    return has_vowel and has_consonant


def to_lower_case(s: str) -> str:
    """``s`` with ASCII capitals turned to lower case."""
    return s.translate(_ASCII_LOWER)


def cal_points(operations: Sequence[str]) -> int:
    """Total of a baseball score record of integers, ``C``, ``D`` and ``+``."""
    scores: list[int] = []
    for operation in operations:
        if operation == "C":
            if not scores:
                raise ValueError("'C' with no score to cancel")
            scores.pop()
        elif operation == "D":
            if not scores:
                raise ValueError("'D' with no score to double")
            scores.append(2 * scores[-1])
        elif operation == "+":
            if len(scores) < 2:
                raise ValueError("'+' needs two previous scores")
            scores.append(scores[-1] + scores[-2])
        else:
            scores.append(int(operation))
    return sum(scores)