"""
Expression Normalizer
Rewrites embedded ``{expr}`` notation in INP body lines into plain decimals
before records are assembled.

Two shapes occur in eQuest output:
    KEY = {3/4}          closed bracket, 3 decimals  -> KEY = 0.750
    KEY = {1.5 * (2+1)}  closed bracket, arithmetic  -> KEY = 4.500
    KEY = {1/3           unclosed ratio, 4 decimals  -> KEY = 0.3333

Only ``+ - * / ( )``, unary signs and decimal literals are understood.
Anything else (eQuest functions, symbol references) leaves the line as it was.
"""

import logging
import re
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

CLOSED_EXPRESSION = re.compile(r'\{\s*([^{}]*?)\s*\}')
UNCLOSED_RATIO = re.compile(r'\{\s*(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)\s*$')
SIMPLE_RATIO = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)\s*/\s*(\d+(?:\.\d*)?|\.\d+)$')
TOKEN = re.compile(r'\s*(?:(\d+\.\d*|\.\d+|\d+)|(\S))')


class ExpressionError(ValueError):
    """Raised when bracket text is not a plain arithmetic expression"""
    pass


class ArithmeticParser:
    """
    Recursive-descent evaluator for decimal arithmetic

        expr   := term (('+' | '-') term)*
        term   := factor (('*' | '/') factor)*
        factor := ('+' | '-') factor | NUMBER | '(' expr ')'
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = self._tokenize(text)
        self.pos = 0

    def _tokenize(self, text: str) -> List[Tuple[str, str]]:
        tokens = []
        for number, symbol in TOKEN.findall(text):
            if number:
                tokens.append(('num', number))
            elif symbol in '+-*/()':
                tokens.append(('op', symbol))
            else:
                raise ExpressionError(f"Unexpected character {symbol!r} in {text!r}")
        return tokens

    def _peek(self) -> Optional[Tuple[str, str]]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _take(self) -> Tuple[str, str]:
        token = self._peek()
        if token is None:
            raise ExpressionError(f"Unexpected end of expression {self.text!r}")
        self.pos += 1
        return token

    def evaluate(self) -> float:
        if not self.tokens:
            raise ExpressionError("Empty expression")
        value = self._expr()
        if self._peek() is not None:
            raise ExpressionError(f"Trailing input in {self.text!r}")
        return value

    def _expr(self) -> float:
        value = self._term()
        while self._peek() in (('op', '+'), ('op', '-')):
            _, op = self._take()
            right = self._term()
            value = value + right if op == '+' else value - right
        return value

    def _term(self) -> float:
        value = self._factor()
        while self._peek() in (('op', '*'), ('op', '/')):
            _, op = self._take()
            right = self._factor()
            if op == '*':
                value *= right
            else:
                if right == 0:
                    raise ExpressionError(f"Division by zero in {self.text!r}")
                value /= right
        return value

    def _factor(self) -> float:
        kind, text = self._take()
        if kind == 'num':
            return float(text)
        if text in '+-':
            value = self._factor()
            return value if text == '+' else -value
        if text == '(':
            value = self._expr()
            if self._take() != ('op', ')'):
                raise ExpressionError(f"Unbalanced parentheses in {self.text!r}")
            return value
        raise ExpressionError(f"Unexpected {text!r} in {self.text!r}")


def evaluate_arithmetic(text: str) -> float:
    return ArithmeticParser(text).evaluate()


def _ratio(numerator: str, denominator: str) -> float:
    denominator_value = float(denominator)
    if denominator_value == 0:
        raise ExpressionError(f"Division by zero in {numerator}/{denominator}")
    return float(numerator) / denominator_value


def evaluate_bracket(expression: str) -> str:
    """Decimal text (3 places) for the body of a closed ``{...}``"""
    expression = expression.strip()
    match = SIMPLE_RATIO.match(expression)
    if match:
        value = _ratio(match.group(1), match.group(2))
    else:
        value = evaluate_arithmetic(expression)
    return f"{value:.3f}"


def normalize_line(line: str, line_number: Optional[int] = None) -> str:
    """
    Replace embedded bracket expressions with decimal text.

    Lines without ``{`` are returned untouched. A line whose expression
    cannot be evaluated is returned unchanged and a warning is logged.
    """
    if '{' not in line:
        return line

    try:
        if CLOSED_EXPRESSION.search(line):
            return CLOSED_EXPRESSION.sub(lambda m: evaluate_bracket(m.group(1)), line)

        match = UNCLOSED_RATIO.search(line)
        if match:
            value = _ratio(match.group(1), match.group(2))
            return line[:match.start()] + f"{value:.4f}"
    except ExpressionError as e:
        logger.warning(f"Leaving expression unevaluated at line {line_number}: {e}")

    return line
