"""
The set of parse-nodes in simple form.
The parser calls these constructors top-down as it recognizes each phrase.

Nodes are frozen: nothing after the parser gets to rearrange the tree.
They compare structurally, so two parses of the same text come out equal.
There are no accept-methods; passes dispatch on the class name via a Visitor.
"""
from dataclasses import dataclass
from typing import Optional
from .tokens import Token
from .values import Value

class Expr:
	""" Anything that produces a value. """

class Stmt:
	""" Anything executed for its effect. """

@dataclass(frozen=True)
class Literal(Expr):
	value: Value

@dataclass(frozen=True)
class Grouping(Expr):
	expression: Expr

@dataclass(frozen=True)
class Unary(Expr):
	operator: Token
	right: Expr

@dataclass(frozen=True)
class Binary(Expr):
	left: Expr
	operator: Token
	right: Expr

@dataclass(frozen=True)
class Variable(Expr):
	name: Token

@dataclass(frozen=True)
class Assign(Expr):
	name: Token
	value: Expr

@dataclass(frozen=True)
class Expression(Stmt):
	expression: Expr

@dataclass(frozen=True)
class Print(Stmt):
	expression: Expr

@dataclass(frozen=True)
class Var(Stmt):
	name: Token
	initializer: Optional[Expr]

@dataclass(frozen=True)
class Block(Stmt):
	statements: tuple[Stmt, ...]
