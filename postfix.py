import logging
import re
from dataclasses import dataclass, field

from symbols import (
        FUNCTIONS,
        InvalidInputError,
        MalformedExpressionError,
        function,
        identifier,
        isFunctionName,
        leftParen,
        number,
        operands,
        operator,
        rightParen,
        shouldPop
        )

logger = logging.getLogger(__name__)

@dataclass
class postfixSettings:
    functions: dict = field(default_factory=lambda: dict(FUNCTIONS)) # lower-case name -> arity
    separator: str = " "

tokenPattern = re.compile(r"[0-9]+|[a-z]+|[A-Z]+|[-+*/^()]")

def classify(text, functions):
    if text.isdigit():
        return number(text)
    if text.isalpha():
        if isFunctionName(text, functions):
            return function(text, functions[text.lower()])
        return identifier(text)
    if text == "(":
        return leftParen()
    if text == ")":
        return rightParen()
    return operator(text)

def tokenize(expression, settings=None):
    """
    Split an infix expression into tokens, left to right.

    Digit runs, lower-case runs and upper-case runs each become one token;
    `+ - * / ^ ( )` are single-character tokens. Anything else is dropped.
    """
    if not expression:
        raise InvalidInputError("expression must be non-empty")
    settings = settings or postfixSettings()
    tokens = []
    end = 0
    for match in tokenPattern.finditer(expression):
        if match.start() > end:
            logger.debug(f"dropped {expression[end:match.start()]!r}")
        tokens.append(classify(match.group(), settings.functions))
        end = match.end()
    return tokens

def popUntilLeftParen(operatorStack, output):
    # returns False when the stack runs out before a `(` turns up
    while operatorStack:
        top = operatorStack.pop()
        if isinstance(top, leftParen):
            return True
        output.append(top)
    return False

def addOperator(output, operatorStack, op):
    while (
    operatorStack and
    isinstance(operatorStack[-1], operator) and
    shouldPop(operatorStack[-1].text, op.text)
    ):
        output.append(operatorStack.pop())
    operatorStack.append(op)

def convert(tokens):
    """Reorder infix tokens into postfix order with the shunting-yard algorithm."""
    tokens = list(tokens)
    output = []
    operatorStack = []
    for item in tokens:
        if isinstance(item, function):
            operatorStack.append(item)
        elif isinstance(item, operands):
            output.append(item)
        elif isinstance(item, operator):
            addOperator(output, operatorStack, item)
        elif isinstance(item, leftParen):
            operatorStack.append(item)
        elif isinstance(item, rightParen):
            if not popUntilLeftParen(operatorStack, output):
                raise MalformedExpressionError("unbalanced parentheses: `)` without matching `(`")
            if operatorStack and isinstance(operatorStack[-1], function):
                output.append(operatorStack.pop())
    while operatorStack:
        top = operatorStack.pop()
        if isinstance(top, leftParen):
            raise MalformedExpressionError("unbalanced parentheses: `(` without matching `)`")
        output.append(top)
    logger.debug(f"converted {len(tokens)} tokens into {len(output)}")
    return output

def render(tokens, separator=" "):
    return separator.join(str(item) for item in tokens)

def infixToPostfix(expression, settings=None):
    settings = settings or postfixSettings()
    return render(convert(tokenize(expression, settings)), settings.separator)

def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    expression = "5x^2 / sin(x)"
    logger.info(f"converting {expression!r}")
    print(infixToPostfix(expression))

if __name__ == "__main__":
    main()
