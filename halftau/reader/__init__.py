from halftau.reader.lexer import Token, lex
from halftau.reader.parser import TokenStream, parse, read

__all__ = ["Token", "lex", "TokenStream", "parse", "read"]
