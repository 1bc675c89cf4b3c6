from kappa.reader.parser import tokenize, parse, atom, read

__all__ = ["tokenize", "parse", "atom", "read"]
