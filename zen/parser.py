"""
Recursive-descent parser. Each grammar rule is one method, listed from
lowest precedence to highest:

	program        := declaration* EOF
	declaration    := "var" IDENTIFIER ( "=" expression )? ";" | statement
	statement      := "print" expression ";" | "{" declaration* "}" | expression ";"
	assignment     := IDENTIFIER "=" assignment | equality
	equality       := comparison ( ( "==" | "!=" ) comparison )*
	comparison     := addition ( ( ">" | ">=" | "<" | "<=" ) addition )*
	addition       := multiplication ( ( "+" | "-" ) multiplication )*
	multiplication := unary ( ( "*" | "/" ) unary )*
	unary          := ( "!" | "-" ) unary | primary
	primary        := NUMBER | STRING | "true" | "false" | "none" | "(" expression ")" | IDENTIFIER

After a syntax error, the parser skips ahead to the next statement boundary
and carries on, so one pass can turn up several independent mistakes.
"""
from typing import Optional
from .tokens import Token, TokenKind
from .diagnostics import Report
from . import syntax

T = TokenKind

_STATEMENT_STARTERS = frozenset([T.CLASS, T.FUN, T.VAR, T.FOR, T.IF, T.WHILE, T.PRINT, T.RETURN])

_LITERAL_KEYWORDS = {T.FALSE: False, T.TRUE: True, T.NONE: None}

class ParseError(Exception):
	# Only ever raised and caught inside this module. The report has the details.
	pass

class Parser:
	def __init__(self, tokens:list[Token], report:Report):
		assert tokens and tokens[-1].kind is T.EOF
		self._tokens = tokens
		self._report = report
		self._current = 0

	def parse(self) -> list[syntax.Stmt]:
		statements = []
		while not self._at_end():
			stmt = self._declaration()
			if stmt is not None: statements.append(stmt)
		return statements

	def parse_expression(self) -> Optional[syntax.Expr]:
		""" For tests and tools that want a bare expression. """
		try: return self._expression()
		except ParseError: return None

	# Statements

	def _declaration(self) -> Optional[syntax.Stmt]:
		try:
			if self._match(T.VAR): return self._var_declaration()
			return self._statement()
		except ParseError:
			self._synchronize()
			return None
		except RecursionError:
			self._report.parse_error(self._peek(), "Expression nested too deeply.")
			self._synchronize()
			return None

	def _var_declaration(self) -> syntax.Var:
		name = self._consume(T.IDENTIFIER, "Expect variable name.")
		initializer = self._expression() if self._match(T.EQUAL) else None
		self._consume(T.SEMICOLON, "Expect ';' after variable declaration.")
		return syntax.Var(name, initializer)

	def _statement(self) -> syntax.Stmt:
		if self._match(T.PRINT): return self._print_statement()
		if self._match(T.LEFT_BRACE): return syntax.Block(self._block())
		return self._expression_statement()

	def _print_statement(self) -> syntax.Print:
		value = self._expression()
		self._consume(T.SEMICOLON, "Expect ';' after value.")
		return syntax.Print(value)

	def _expression_statement(self) -> syntax.Expression:
		expr = self._expression()
		self._consume(T.SEMICOLON, "Expect ';' after expression.")
		return syntax.Expression(expr)

	def _block(self) -> tuple[syntax.Stmt, ...]:
		statements = []
		while not self._check(T.RIGHT_BRACE) and not self._at_end():
			stmt = self._declaration()
			if stmt is not None: statements.append(stmt)
		self._consume(T.RIGHT_BRACE, "Expect '}' after block.")
		return tuple(statements)

	# Expressions

	def _expression(self) -> syntax.Expr:
		return self._assignment()

	def _assignment(self) -> syntax.Expr:
		expr = self._equality()
		if self._match(T.EQUAL):
			equals = self._previous()
			value = self._assignment()
			if isinstance(expr, syntax.Variable):
				return syntax.Assign(expr.name, value)
			# Report, but the parser is not confused, so no need to synchronize.
			self._report.parse_error(equals, "Invalid assignment target.")
		return expr

	def _left_associative(self, operand, *kinds:TokenKind) -> syntax.Expr:
		expr = operand()
		while self._match(*kinds):
			operator = self._previous()
			expr = syntax.Binary(expr, operator, operand())
		return expr

	def _equality(self):
		return self._left_associative(self._comparison, T.BANG_EQUAL, T.EQUAL_EQUAL)

	def _comparison(self):
		return self._left_associative(self._addition, T.GREATER, T.GREATER_EQUAL, T.LESS, T.LESS_EQUAL)

	def _addition(self):
		return self._left_associative(self._multiplication, T.MINUS, T.PLUS)

	def _multiplication(self):
		return self._left_associative(self._unary, T.SLASH, T.STAR)

	def _unary(self) -> syntax.Expr:
		if self._match(T.BANG, T.MINUS):
			operator = self._previous()
			return syntax.Unary(operator, self._unary())
		return self._primary()

	def _primary(self) -> syntax.Expr:
		token = self._peek()
		if token.kind in _LITERAL_KEYWORDS:
			self._advance()
			return syntax.Literal(_LITERAL_KEYWORDS[token.kind])
		if self._match(T.NUMBER, T.STRING):
			return syntax.Literal(token.literal)
		if self._match(T.IDENTIFIER):
			return syntax.Variable(token)
		if self._match(T.LEFT_PAREN):
			expr = self._expression()
			self._consume(T.RIGHT_PAREN, "Expect ')' after expression.")
			return syntax.Grouping(expr)
		raise self._error(token, "Expect expression.")

	# Token-stream plumbing

	def _match(self, *kinds:TokenKind) -> bool:
		for kind in kinds:
			if self._check(kind):
				self._advance()
				return True
		return False

	def _consume(self, kind:TokenKind, message:str) -> Token:
		if self._check(kind): return self._advance()
		raise self._error(self._peek(), message)

	def _check(self, kind:TokenKind) -> bool:
		return not self._at_end() and self._peek().kind is kind

	def _advance(self) -> Token:
		if not self._at_end(): self._current += 1
		return self._previous()

	def _at_end(self) -> bool:
		return self._peek().kind is T.EOF

	def _peek(self) -> Token:
		return self._tokens[self._current]

	def _previous(self) -> Token:
		return self._tokens[self._current - 1]

	def _error(self, token:Token, message:str) -> ParseError:
		self._report.parse_error(token, message)
		return ParseError(token, message)

	def _synchronize(self):
		""" Discard tokens until something that looks like the start of the next statement. """
		self._advance()
		while not self._at_end():
			if self._previous().kind is T.SEMICOLON: return
			if self._peek().kind in _STATEMENT_STARTERS: return
			self._advance()

def parse(tokens:list[Token], report:Report) -> list[syntax.Stmt]:
	return Parser(tokens, report).parse()
