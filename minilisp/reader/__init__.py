from minilisp.reader.parser import lex, parse_atom, read, TokenStream

__all__ = ["lex", "parse_atom", "read", "TokenStream"]
