from dataclasses import dataclass

class InvalidInputError(ValueError):
    """Raised when there is no expression text to tokenize."""

class MalformedExpressionError(ValueError):
    """Raised when the parentheses of an expression do not balance."""

# lower-case name -> arity
FUNCTIONS = {
        "sin": 1,
        "cos": 1,
        "tan": 1
        }

opWeights = {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "^": 3
        }
opRightAssociative = ("^",)

def getOperatorWeight(symbol):
    if symbol not in opWeights:
        raise ValueError(f"invalid operation `{symbol}`.")
    return opWeights[symbol]

def isRightAssociative(symbol):
    return symbol in opRightAssociative

def shouldPop(top, incoming):
    """
    Whether the operator `top`, sitting on the stack, must be emitted before
    `incoming` is pushed. Equal weights pop only for left-associative operators.
    """
    topWeight = getOperatorWeight(top)
    incomingWeight = getOperatorWeight(incoming)
    if topWeight == incomingWeight:
        return not isRightAssociative(top)
    return topWeight > incomingWeight

def isFunctionName(name, functions=None):
    if functions is None:
        functions = FUNCTIONS
    return name.lower() in functions

@dataclass(frozen=True)
class token:
    text: str
    def __repr__(self):
        return self.text
    __str__ = __repr__

class number(token):
    pass

class identifier(token):
    pass

@dataclass(frozen=True, repr=False)
class function(token):
    arity: int = 1

class operator(token):
    @property
    def weight(self):
        return getOperatorWeight(self.text)
    @property
    def rightAssociative(self):
        return isRightAssociative(self.text)

class leftParen(token):
    def __init__(self, text="("):
        super().__init__(text)

class rightParen(token):
    def __init__(self, text=")"):
        super().__init__(text)

operands = (number, identifier)
