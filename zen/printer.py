"""
Render a syntax tree in fully-parenthesized prefix form, for looking at what the parser made:

	-123 * (45.67)    becomes    (* (- 123) (group 45.67))
"""
from boozetools.support.foundation import Visitor
from . import syntax
from .values import stringify

class AstPrinter(Visitor):
	def render(self, node) -> str:
		return self.visit(node)

	def _wrap(self, name:str, *parts) -> str:
		return "(%s)" % " ".join([name, *(self.visit(p) for p in parts)])

	def visit_Literal(self, expr:syntax.Literal):
		if isinstance(expr.value, str): return '"%s"' % expr.value
		return stringify(expr.value)

	def visit_Grouping(self, expr:syntax.Grouping): return self._wrap("group", expr.expression)
	def visit_Unary(self, expr:syntax.Unary): return self._wrap(expr.operator.lexeme, expr.right)
	def visit_Binary(self, expr:syntax.Binary): return self._wrap(expr.operator.lexeme, expr.left, expr.right)
	def visit_Variable(self, expr:syntax.Variable): return expr.name.lexeme
	def visit_Assign(self, expr:syntax.Assign): return "(= %s %s)" % (expr.name.lexeme, self.visit(expr.value))

	def visit_Expression(self, stmt:syntax.Expression): return self._wrap(";", stmt.expression)
	def visit_Print(self, stmt:syntax.Print): return self._wrap("print", stmt.expression)

	def visit_Var(self, stmt:syntax.Var):
		if stmt.initializer is None: return "(var %s)" % stmt.name.lexeme
		return "(var %s %s)" % (stmt.name.lexeme, self.visit(stmt.initializer))

	def visit_Block(self, stmt:syntax.Block): return self._wrap("block", *stmt.statements)

def render(node) -> str:
	return AstPrinter().render(node)
