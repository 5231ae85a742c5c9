"""
Hand-written scanner: one pass, left to right, never more than two characters of lookahead.

Lexical errors go to the report and scanning carries on, so a single pass
can find every stray character in the text.
"""
from .tokens import Token, TokenKind, KEYWORDS, LITERAL
from .diagnostics import Report

_PUNCTUATION = {
	"(": TokenKind.LEFT_PAREN,
	")": TokenKind.RIGHT_PAREN,
	"{": TokenKind.LEFT_BRACE,
	"}": TokenKind.RIGHT_BRACE,
	",": TokenKind.COMMA,
	".": TokenKind.DOT,
	"-": TokenKind.MINUS,
	"+": TokenKind.PLUS,
	";": TokenKind.SEMICOLON,
	"*": TokenKind.STAR,
}

# First character -> (kind if followed by '=', kind otherwise)
_MAYBE_EQUAL = {
	"!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
	"=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
	">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
	"<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
}

_WHITESPACE = frozenset(" \r\t")

def is_digit(c:str) -> bool:
	# str.isdigit would admit all manner of non-ASCII digits.
	return "0" <= c <= "9"

def is_alpha(c:str) -> bool:
	return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"

def is_alphanumeric(c:str) -> bool:
	return is_alpha(c) or is_digit(c)

class Scanner:
	def __init__(self, source:str, report:Report):
		self._source = source
		self._report = report
		self._tokens = []
		self._start = 0
		self._current = 0
		self._line = 1

	def scan_tokens(self) -> list[Token]:
		while not self._at_end():
			self._start = self._current
			self._scan_token()
		self._tokens.append(Token(TokenKind.EOF, "", None, self._line, len(self._source)))
		return self._tokens

	def _scan_token(self):
		c = self._advance()
		if c in _PUNCTUATION:
			self._add_token(_PUNCTUATION[c])
		elif c in _MAYBE_EQUAL:
			double, single = _MAYBE_EQUAL[c]
			self._add_token(double if self._match("=") else single)
		elif c == "/":
			if self._match("/"):
				while self._peek() != "\n" and not self._at_end(): self._advance()
			else:
				self._add_token(TokenKind.SLASH)
		elif c in _WHITESPACE:
			pass
		elif c == "\n":
			self._line += 1
		elif c == '"':
			self._string()
		elif is_digit(c):
			self._number()
		elif is_alpha(c):
			self._identifier()
		else:
			self._report.scan_error(self._line, "Unexpected character.", self._start)

	def _string(self):
		while self._peek() != '"' and not self._at_end():
			if self._peek() == "\n": self._line += 1
			self._advance()
		if self._at_end():
			self._report.scan_error(self._line, "Unterminated string.", self._start)
			return
		self._advance()  # The closing quote
		self._add_token(TokenKind.STRING, self._source[self._start+1:self._current-1])

	def _number(self):
		while is_digit(self._peek()): self._advance()
		# A dot belongs to the number only if a digit follows it.
		if self._peek() == "." and is_digit(self._peek_next()):
			self._advance()
			while is_digit(self._peek()): self._advance()
		self._add_token(TokenKind.NUMBER, float(self._source[self._start:self._current]))

	def _identifier(self):
		while is_alphanumeric(self._peek()): self._advance()
		text = self._source[self._start:self._current]
		self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

	def _at_end(self) -> bool:
		return self._current >= len(self._source)

	def _advance(self) -> str:
		c = self._source[self._current]
		self._current += 1
		return c

	def _match(self, expected:str) -> bool:
		if self._at_end() or self._source[self._current] != expected:
			return False
		self._current += 1
		return True

	def _peek(self) -> str:
		if self._at_end(): return "\0"
		return self._source[self._current]

	def _peek_next(self) -> str:
		if self._current + 1 >= len(self._source): return "\0"
		return self._source[self._current + 1]

	def _add_token(self, kind:TokenKind, literal:LITERAL=None):
		text = self._source[self._start:self._current]
		self._tokens.append(Token(kind, text, literal, self._line, self._start))

def scan(source:str, report:Report) -> list[Token]:
	return Scanner(source, report).scan_tokens()
