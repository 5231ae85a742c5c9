"""
Direct interpretation: walk the tree, keep the variables in a chain of environments.

One Interpreter lives as long as the session does, so globals defined on one
line of the prompt are still there on the next. Each block gets its own
environment for exactly as long as the block runs.
"""
import math
import operator
from collections import deque
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .tokens import Token, TokenKind
from .values import Value, is_number, is_string, is_truthy, is_equal, stringify
from .environment import Environment
from .diagnostics import Report, ZenRuntimeError

T = TokenKind

ARITHMETIC = {
	T.MINUS: operator.sub,
	T.STAR: operator.mul,
}

RELATIONAL = {
	T.GREATER: operator.gt,
	T.GREATER_EQUAL: operator.ge,
	T.LESS: operator.lt,
	T.LESS_EQUAL: operator.le,
}

def _divide(a:float, b:float) -> float:
	# Numbers are IEEE doubles, so division by zero is not an error.
	try: return a / b
	except ZeroDivisionError:
		if a == 0.0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)

class Interpreter(Visitor):
	def __init__(self):
		self.globals = Environment()
		self._env = self.globals

	def interpret(self, statements:list[syntax.Stmt], report:Report):
		""" Run a batch. The first runtime error abandons the rest of the batch. """
		try:
			for stmt in statements:
				self.execute(stmt)
		except ZenRuntimeError as ex:
			report.runtime_error(ex)
		except RecursionError:
			report.runtime_error(ZenRuntimeError(_blame(stmt), "Expression nested too deeply."))

	def execute(self, stmt:syntax.Stmt):
		self.visit(stmt)

	def evaluate(self, expr:syntax.Expr) -> Value:
		return self.visit(expr)

	# Statements

	def visit_Expression(self, stmt:syntax.Expression):
		self.evaluate(stmt.expression)

	def visit_Print(self, stmt:syntax.Print):
		print(stringify(self.evaluate(stmt.expression)))

	def visit_Var(self, stmt:syntax.Var):
		value = None if stmt.initializer is None else self.evaluate(stmt.initializer)
		self._env.define(stmt.name.lexeme, value)

	def visit_Block(self, stmt:syntax.Block):
		self.execute_block(stmt.statements, Environment(self._env))

	def execute_block(self, statements, env:Environment):
		previous = self._env
		self._env = env
		try:
			for stmt in statements:
				self.execute(stmt)
		finally:
			self._env = previous

	# Expressions

	def visit_Literal(self, expr:syntax.Literal):
		return expr.value

	def visit_Grouping(self, expr:syntax.Grouping):
		return self.evaluate(expr.expression)

	def visit_Variable(self, expr:syntax.Variable):
		return self._env.get(expr.name)

	def visit_Assign(self, expr:syntax.Assign):
		value = self.evaluate(expr.value)
		self._env.assign(expr.name, value)
		return value

	def visit_Unary(self, expr:syntax.Unary):
		right = self.evaluate(expr.right)
		kind = expr.operator.kind
		if kind is T.BANG:
			return not is_truthy(right)
		if kind is T.MINUS:
			_check_number_operand(expr.operator, right)
			return -right
		raise NotImplementedError(kind)

	def visit_Binary(self, expr:syntax.Binary):
		left = self.evaluate(expr.left)
		right = self.evaluate(expr.right)
		op = expr.operator
		kind = op.kind
		if kind is T.PLUS:
			if is_number(left) and is_number(right): return left + right
			if is_string(left) and is_string(right): return left + right
			raise ZenRuntimeError(op, "Operands must be two numbers or two strings.")
		if kind is T.EQUAL_EQUAL: return is_equal(left, right)
		if kind is T.BANG_EQUAL: return not is_equal(left, right)
		_check_number_operands(op, left, right)
		if kind is T.SLASH: return _divide(left, right)
		if kind in ARITHMETIC: return ARITHMETIC[kind](left, right)
		if kind in RELATIONAL: return RELATIONAL[kind](left, right)
		raise NotImplementedError(kind)

def _check_number_operand(op:Token, operand:Value):
	if not is_number(operand):
		raise ZenRuntimeError(op, "Operand must be a number.")

def _check_number_operands(op:Token, left:Value, right:Value):
	if not (is_number(left) and is_number(right)):
		raise ZenRuntimeError(op, "Operands must be numbers.")

def _blame(stmt:syntax.Stmt) -> Optional[Token]:
	""" The outermost token in a statement, found without recursion, since the tree is too deep for that. """
	frontier = deque([stmt])
	while frontier:
		node = frontier.popleft()
		if isinstance(node, Token): return node
		if isinstance(node, tuple): frontier.extend(node)
		elif isinstance(node, (syntax.Expr, syntax.Stmt)): frontier.extend(vars(node).values())
	return None
