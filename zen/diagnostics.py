"""
Everything that goes wrong gets written down here.

The scanner and parser file static issues; the interpreter files runtime issues.
Nothing prints until somebody calls complain_to_console, so tests and drivers
decide what becomes of the complaints.
"""
import sys
from pathlib import Path
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

from .tokens import Token, TokenKind

class TooManyIssues(Exception):
	pass

class ZenRuntimeError(Exception):
	""" The one exception the evaluator raises on purpose. It knows which token to blame. """
	def __init__(self, token:Optional[Token], message:str):
		super().__init__(message)
		self.token = token

	@property
	def message(self) -> str: return self.args[0]

class Report:
	_issues : list["Pic"]
	_source : Optional[SourceText]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._told = 0
		self._max_issues = max_issues
		self._source = None

	def ok(self): return not self._issues

	def had_static_error(self): return any(not i.at_runtime for i in self._issues)
	def had_runtime_error(self): return any(i.at_runtime for i in self._issues)

	@property
	def issues(self) -> list["Pic"]: return list(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()
		self._told = 0

	def info(self, *args:Any):
		if self._verbose:
			print(*args, file=sys.stderr)

	def read_source(self, text:str, path:Optional[Path]=None):
		""" Remember the text under examination, so verbose complaints can show where. """
		self._source = SourceText(text, filename=str(path) if path else None)

	def _point_at(self, offset:Optional[int], width:int) -> list["Annotation"]:
		if self._verbose and self._source is not None and offset is not None:
			return [Annotation(self._source, offset, width)]
		return []

	# Methods the scanner calls:
	def scan_error(self, line:int, message:str, offset:Optional[int]=None):
		self.issue(Pic(_static_text(line, "", message), self._point_at(offset, 1)))

	# Methods the parser calls:
	def parse_error(self, token:Token, message:str):
		if token.kind is TokenKind.EOF:
			where, anns = " at end", []
		else:
			where, anns = " at '%s'" % token.lexeme, self._point_at(token.offset, len(token.lexeme))
		self.issue(Pic(_static_text(token.line, where, message), anns))

	# Methods the interpreter calls:
	def runtime_error(self, error:ZenRuntimeError):
		token = error.token
		if token is None:
			intro, anns = error.message, []
		else:
			intro = "%s\n[line %d]" % (error.message, token.line)
			anns = self._point_at(token.offset, len(token.lexeme))
		self.issue(Pic(intro, anns, at_runtime=True))

	def complain_to_console(self):
		""" Emit the issues not yet emitted to the console. """
		_bemoan(self._issues[self._told:], self._verbose)
		self._told = len(self._issues)

	def assert_no_issues(self, message:str):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

def _static_text(line:int, where:str, message:str) -> str:
	return "[line %d] Error%s: %s" % (line, where, message)

class Annotation:
	def __init__(self, source:SourceText, offset:int, width:int, caption:str=""):
		self._source = source
		self.offset = offset
		self.width = width
		self.caption = caption

	def illustrate(self):
		row, col = self._source.find_row_col(self.offset)
		single_line = self._source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], *, at_runtime:bool=False):
		self._intro, self._anns = intro, anns
		self.at_runtime = at_runtime

	@property
	def description(self): return self._intro

	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		return '\n'.join(lines)

def _bemoan(issues, verbose):
	for i in issues:
		if verbose: print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
