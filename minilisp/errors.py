class MiniLispError(Exception):
    """ Base class for all minilisp errors"""


class ReaderError(MiniLispError):
    """ Raised when source text cannot be read into a form"""


class IncompleteInput(ReaderError):
    """ Raised when input ends inside an unterminated list"""


class EvalError(MiniLispError):
    """ Base class for errors raised while evaluating a form"""


class SymbolNotFound(EvalError):
    """ Raised when a symbol is not bound in any frame of the chain"""

    def __init__(self, name):
        super().__init__(f"Cannot resolve unbound symbol {name}")
        self.name = str(name)


class ExpectedSymbol(EvalError):
    """ Raised when a form needs a symbol (e.g. the name in define)"""


class ExpectedExpression(EvalError):
    """ Raised when a form is missing a required expression"""


class ExpectedBoolean(EvalError):
    """ Raised when an if condition does not evaluate to a boolean"""


class ExpectedParameterList(EvalError):
    """ Raised when lambda is not given a list of symbols as parameters"""


class ExpectedBody(EvalError):
    """ Raised when lambda is not given a list as its body"""


class ExpectedSymbolOrApplicable(EvalError):
    """ Raised when a list head is neither a symbol nor evaluates to a lambda or boolean"""


class NotApplicable(EvalError):
    """ Raised when a function name resolves to something that is not a lambda"""


class ArityMismatch(EvalError):
    """ Raised when the number of arguments does not match the number of parameters"""

    def __init__(self, expected: int, got: int, missing=None):
        if missing is not None:
            message = f"Missing argument for parameter {missing}: expected {expected}, got {got}"
        else:
            message = f"Too many arguments: expected {expected}, got {got}"
        super().__init__(message)
        self.expected = expected
        self.got = got
        self.missing = None if missing is None else str(missing)


class IncompatibleType(EvalError):
    """ Raised when an operator receives a value of the wrong kind"""

    def __init__(self, expected: str, got: str, operator=None):
        where = f" for {operator}" if operator is not None else ""
        super().__init__(f"Expected {expected}{where}, got {got}")
        self.expected = expected
        self.got = got
        self.operator = None if operator is None else str(operator)


class EmptyExpression(EvalError):
    """ Raised when the empty list is evaluated"""


class DivisionByZero(EvalError):
    """ Raised when an integer is divided by zero"""


class StackExhausted(EvalError):
    """ Raised when evaluation nests deeper than the recursion limit"""
