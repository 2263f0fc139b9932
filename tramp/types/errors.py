from __future__ import annotations


class TrampError(Exception):
    """ Base class for all tramp errors"""
    pass

# -------------------------------
# Reader errors
# -------------------------------
class ReaderError(TrampError):
    """ Raised when source text cannot be read as an expression"""
    pass

class UnexpectedEndOfInput(ReaderError):
    """ Raised when the tokens run out where an expression is expected"""

    def __init__(self, message: str = "Unexpected end of input"):
        super().__init__(message)

class UnmatchedParenthesis(ReaderError):
    """ Raised when input ends inside an unterminated list"""

    def __init__(self, message: str = "Unmatched parenthesis"):
        super().__init__(message)

class UnexpectedClosingParenthesis(ReaderError):
    """ Raised when ')' appears where an expression is expected"""

    def __init__(self, message: str = "Unexpected closing parenthesis"):
        super().__init__(message)

class TrailingInput(ReaderError):
    """ Raised when tokens remain after one complete expression"""

    def __init__(self, message: str = "Unexpected extra input"):
        super().__init__(message)

# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(TrampError):
    """ Raised when an expression cannot be evaluated"""
    pass

class UndefinedVariable(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"Undefined variable: {symbol}")
        self.symbol = symbol

class NotAProcedure(EvalError):
    """ Raised when the operator of an application is not a procedure"""

    def __init__(self, operator):
        from tramp.printer import to_string
        super().__init__(f"Not a procedure: {to_string(operator)}")
        self.operator = operator

class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, name: str, expected: int, received: int):
        super().__init__(f"{name} expects {expected} argument(s), got {received}")
        self.expected = expected
        self.received = received

class InvalidSymbol(EvalError):
    """ Raised when a non-symbol is used where a name is required"""

class MalformedForm(EvalError):
    """ Raised when a special form does not have the required shape"""

class WrongType(EvalError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class RecursionDepthExceeded(EvalError):
    """ Raised when non-tail recursion exhausts the host stack"""
