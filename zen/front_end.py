"""
The pipeline, end to end: text -> tokens -> statements -> effects.
Drivers (the command line, the prompt, the tests) come in through run().
"""
from pathlib import Path
from typing import Optional

from . import syntax
from .tokens import Token
from .scanner import scan
from .parser import parse
from .diagnostics import Report
from .interpreter import Interpreter

def scan_text(text:str, report:Report, path:Optional[Path]=None) -> list[Token]:
	report.read_source(text, path)
	return scan(text, report)

def parse_text(text:str, report:Report, path:Optional[Path]=None) -> list[syntax.Stmt]:
	""" Scan and parse. If the report has any issues, do not run the result. """
	tokens = scan_text(text, report, path)
	report.info("Scanned %d tokens" % len(tokens))
	return parse(tokens, report)

def run(text:str, interpreter:Interpreter, report:Report, path:Optional[Path]=None):
	"""
	Any static error means nothing runs at all.
	A runtime error stops the rest of this text, but the interpreter lives on.
	Either way, the report has told the console about it before this returns.
	"""
	statements = parse_text(text, report, path)
	if not report.had_static_error():
		interpreter.interpret(statements, report)
	report.complain_to_console()
