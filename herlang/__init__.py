"""Compiler from HerLang source to C++: lexer, parser, generator and the hcp command."""

__version__ = "0.1.0"