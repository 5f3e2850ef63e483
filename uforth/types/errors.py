class UForthError(Exception):
    """ Base class for all uforth errors"""
    pass

class UForthMalformedLiteral(UForthError):
    """ Raised when a token starting with a digit is not a valid integer"""
    pass

class UForthStackUnderflow(UForthError):
    """ Raised when an operation needs more values than the stack holds"""
    pass

class UForthTypeMismatch(UForthError):
    """ Raised when an operand has the wrong runtime type"""

class UForthDivisionByZero(UForthError):
    """ Raised when dividing, taking a remainder or a negative power of zero"""

class UForthUnterminatedBlock(UForthError):
    """ Raised when `{` and `}` do not balance"""

class UForthUnboundOperationMisuse(UForthError):
    """ Raised when a control operation is given a non-block where a block is required"""

class UForthUnboundSymbol(UForthError):
    """ Raised when a symbol is looked up before it is bound"""

class UForthNonTerminatingLoop(UForthError):
    """ Raised when a loop body provably repeats the same stack forever"""

class UForthRecursionError(UForthError):
    """ Raised when block invocations nest deeper than the host allows"""
