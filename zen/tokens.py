"""
The token model: what the scanner hands the parser.
Tokens are immutable, and every scan ends in exactly one EOF token.
"""
from enum import Enum, auto
from typing import NamedTuple, Optional, Union

class TokenKind(Enum):
	# Single-character punctuation
	LEFT_PAREN = auto()
	RIGHT_PAREN = auto()
	LEFT_BRACE = auto()
	RIGHT_BRACE = auto()
	COMMA = auto()
	DOT = auto()
	MINUS = auto()
	PLUS = auto()
	SEMICOLON = auto()
	SLASH = auto()
	STAR = auto()
	
	# One or two characters
	BANG = auto()
	BANG_EQUAL = auto()
	EQUAL = auto()
	EQUAL_EQUAL = auto()
	GREATER = auto()
	GREATER_EQUAL = auto()
	LESS = auto()
	LESS_EQUAL = auto()
	
	# Literals
	IDENTIFIER = auto()
	STRING = auto()
	NUMBER = auto()
	
	# Reserved words
	AND = auto()
	CLASS = auto()
	ELSE = auto()
	FALSE = auto()
	FOR = auto()
	FUN = auto()
	IF = auto()
	NONE = auto()
	OR = auto()
	PRINT = auto()
	RETURN = auto()
	SUPER = auto()
	THIS = auto()
	TRUE = auto()
	VAR = auto()
	WHILE = auto()
	
	EOF = auto()

KEYWORDS = {
	"and": TokenKind.AND,
	"class": TokenKind.CLASS,
	"else": TokenKind.ELSE,
	"false": TokenKind.FALSE,
	"for": TokenKind.FOR,
	"fun": TokenKind.FUN,
	"if": TokenKind.IF,
	"none": TokenKind.NONE,
	"or": TokenKind.OR,
	"print": TokenKind.PRINT,
	"return": TokenKind.RETURN,
	"super": TokenKind.SUPER,
	"this": TokenKind.THIS,
	"true": TokenKind.TRUE,
	"var": TokenKind.VAR,
	"while": TokenKind.WHILE,
}

LITERAL = Union[float, str]

class Token(NamedTuple):
	kind: TokenKind
	lexeme: str
	literal: Optional[LITERAL]
	line: int
	offset: int = 0  # Index into the source text; only diagnostics care.
	
	def __str__(self): return "%s %s %s" % (self.kind.name, self.lexeme, self.literal)
