"""
Simplest possible environment concept.

This is the canonical list-structured search: look here, then look outward.
A name defined in an inner scope shadows, but never disturbs, the same name further out.
"""
from typing import Optional
from .tokens import Token
from .values import Value
from .diagnostics import ZenRuntimeError

class Environment:
	def __init__(self, enclosing:Optional["Environment"]=None):
		self.enclosing = enclosing
		self._bindings: dict[str, Value] = {}

	def define(self, name:str, value:Value):
		""" Always succeeds. Re-declaring in the same scope simply overwrites. """
		self._bindings[name] = value

	def get(self, name:Token) -> Value:
		return self._holder_of(name)._bindings[name.lexeme]

	def assign(self, name:Token, value:Value):
		""" Assignment never declares: the name must already exist somewhere in the chain. """
		self._holder_of(name)._bindings[name.lexeme] = value

	def _holder_of(self, name:Token) -> "Environment":
		env = self
		while env is not None:
			if name.lexeme in env._bindings: return env
			env = env.enclosing
		raise ZenRuntimeError(name, "Undefined variable '%s'." % name.lexeme)
