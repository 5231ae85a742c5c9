import sys
import unittest

from zen import syntax
from zen.tokens import TokenKind
from zen.scanner import scan
from zen.parser import Parser
from zen.printer import render
from zen.front_end import parse_text
from zen.diagnostics import Report

def _parse(text):
	report = Report()
	statements = parse_text(text, report)
	return statements, report

def _rendered(text):
	statements, report = _parse(text)
	report.assert_no_issues("%r should parse cleanly." % text)
	return [render(s) for s in statements]

class PrecedenceTests(unittest.TestCase):
	
	def expect(self, cases):
		for text, picture in cases.items():
			with self.subTest(text):
				self.assertEqual([picture], _rendered(text))
	
	def test_arithmetic(self):
		self.expect({
			"1 + 2 * 3;": "(; (+ 1 (* 2 3)))",
			"(1 + 2) * 3;": "(; (* (group (+ 1 2)) 3))",
			"-123 * (45.67);": "(; (* (- 123) (group 45.67)))",
			"8 / 4 / 2;": "(; (/ (/ 8 4) 2))",
			"1 - 2 - 3;": "(; (- (- 1 2) 3))",
			"--1;": "(; (- (- 1)))",
		})
	
	def test_comparison_and_equality(self):
		self.expect({
			"1 < 2 == 3 >= 4;": "(; (== (< 1 2) (>= 3 4)))",
			"!!true == false;": "(; (== (! (! true)) false))",
			"1 + 2 > 3 - 4;": "(; (> (+ 1 2) (- 3 4)))",
			"a != b == c;": "(; (== (!= a b) c))",
		})
	
	def test_assignment_is_right_associative(self):
		self.expect({
			"a = b = 3;": "(; (= a (= b 3)))",
			"a = 1 + 2;": "(; (= a (+ 1 2)))",
		})
	
	def test_literals(self):
		self.expect({
			'print "hi";': '(print "hi")',
			"print none;": "(print none)",
			"print true;": "(print true)",
			"print 2.5;": "(print 2.5)",
		})

class StatementTests(unittest.TestCase):
	
	def test_var_declarations(self):
		self.assertEqual(["(var x)", "(var y (* 2 3))"], _rendered("var x; var y = 2 * 3;"))
	
	def test_blocks_nest(self):
		self.assertEqual(
			["(block (var x 1) (block (print x)))"],
			_rendered("{ var x = 1; { print x; } }"),
		)
	
	def test_empty_program(self):
		self.assertEqual([], _rendered(""))
		self.assertEqual([], _rendered("// nothing"))
	
	def test_node_shapes(self):
		statements, report = _parse("var a = 1; a = -a;")
		self.assertTrue(report.ok())
		var, stmt = statements
		self.assertIsInstance(var, syntax.Var)
		self.assertEqual("a", var.name.lexeme)
		self.assertEqual(syntax.Literal(1.0), var.initializer)
		self.assertIsInstance(stmt, syntax.Expression)
		assign = stmt.expression
		self.assertIsInstance(assign, syntax.Assign)
		self.assertIsInstance(assign.value, syntax.Unary)
		self.assertIs(TokenKind.MINUS, assign.value.operator.kind)
		self.assertIsInstance(assign.value.right, syntax.Variable)
	
	def test_nodes_are_frozen(self):
		statements, _ = _parse("print 1;")
		with self.assertRaises(AttributeError):
			statements[0].expression = syntax.Literal(2.0)
	
	def test_parsing_is_deterministic(self):
		text = 'var a = 1;\n{ var b = "two"; print (a + 3) * -a >= 3 == !none; a = 2; }'
		self.assertEqual(_parse(text)[0], _parse(text)[0])
	
	def test_bare_expression(self):
		report = Report()
		expr = Parser(scan("1 + 2", report), report).parse_expression()
		self.assertEqual("(+ 1 2)", render(expr))

class SyntaxErrorTests(unittest.TestCase):
	
	def descriptions(self, text):
		statements, report = _parse(text)
		self.assertTrue(report.had_static_error())
		self.assertFalse(report.had_runtime_error())
		return [i.description for i in report.issues]
	
	def test_missing_expression(self):
		self.assertEqual(["[line 1] Error at ';': Expect expression."], self.descriptions("print ;"))
	
	def test_error_at_end(self):
		self.assertEqual(["[line 1] Error at end: Expect ';' after value."], self.descriptions("print 1"))
		self.assertEqual(["[line 2] Error at end: Expect '}' after block."], self.descriptions("{ print 1;\n"))
	
	def test_unclosed_parenthesis(self):
		self.assertEqual(
			["[line 1] Error at ';': Expect ')' after expression."],
			self.descriptions("print (1 + 2;"),
		)
	
	def test_var_needs_a_name(self):
		self.assertEqual(
			["[line 1] Error at '1': Expect variable name.",
			 "[line 3] Error at 'print': Expect ';' after variable declaration."],
			self.descriptions("var 1;\nvar x = 2\nprint x;"),
		)
	
	def test_expression_statement_needs_semicolon(self):
		self.assertEqual(
			["[line 1] Error at 'print': Expect ';' after expression."],
			self.descriptions("1 + 2 print 3;"),
		)
	
	def test_invalid_assignment_target(self):
		statements, report = _parse("var a = 1; a + 1 = 2; (a) = 3; print a;")
		self.assertEqual(
			["[line 1] Error at '=': Invalid assignment target."]*2,
			[i.description for i in report.issues],
		)
		# No synchronization was needed, so every statement is still there.
		self.assertEqual(4, len(statements))
	
	def test_recovery_finds_several_errors(self):
		statements, report = _parse("print ;\nvar = 1;\nprint (1 + ;\n1 + ;\nprint \"ok\";")
		self.assertEqual(
			["[line 1] Error at ';': Expect expression.",
			 "[line 2] Error at '=': Expect variable name.",
			 "[line 3] Error at ';': Expect expression.",
			 "[line 4] Error at ';': Expect expression."],
			[i.description for i in report.issues],
		)
		self.assertEqual(['(print "ok")'], [render(s) for s in statements])
	
	def test_synchronize_stops_at_statement_keywords(self):
		statements, report = _parse("1 + + 2 var x = 3;")
		self.assertEqual(1, len(report.issues))
		self.assertEqual(["(var x 3)"], [render(s) for s in statements])
	
	def test_nesting_past_the_recursion_limit(self):
		depth = sys.getrecursionlimit()
		statements, report = _parse("print " + "("*depth + "1" + ")"*depth + ";\nprint 2;")
		self.assertEqual(1, len(report.issues))
		self.assertIn("Expression nested too deeply.", report.issues[0].description)
		self.assertEqual(["(print 2)"], [render(s) for s in statements])


if __name__ == '__main__':
	unittest.main()
