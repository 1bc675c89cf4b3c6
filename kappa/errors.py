

class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass

class KappaSyntaxError(KappaError):
    """ Raised when source text cannot be parsed"""

class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is used before it is bound"""
    pass

class KappaArityError(KappaError):
    """ Raised when a form receives too few arguments"""

class KappaTypeError(KappaError):
    """ Raised when the types of arguments passed to a form are incorrect"""

class KappaIndexError(KappaError):
    """ Raised when a vector index is out of range"""

class KappaInvokeError(KappaError):
    """ Raised when the head of a list cannot be applied"""

# All of these are converted to Error values by the evaluator; none of them
# escapes `evaluate`.
