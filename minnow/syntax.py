"""
The set of expression nodes, in simple form.
Whatever produces a program (a translator, the JSON codec, a test case)
calls these constructors bottom-up. Nothing ever mutates a node afterward:
they are frozen dataclasses, so they also compare and hash structurally.

Operators travel as their surface glyphs. The evaluator knows which glyphs
it understands; anything else is representable but will not evaluate.
"""
from dataclasses import dataclass
from typing import Sequence, Union, Any

BINARY_GLYPHS = frozenset(["+", "-", "*", "/", "="])
UNARY_GLYPHS = frozenset(["not", "zero?", "say"])

@dataclass(frozen=True)
class Literal:
	value: Union[bool, int, float, str]

@dataclass(frozen=True)
class Variable:
	name: str

@dataclass(frozen=True)
class BinaryOp:
	glyph: str
	lhs: Any
	rhs: Any

@dataclass(frozen=True)
class UnaryOp:
	glyph: str
	arg: Any

@dataclass(frozen=True)
class If:
	if_part: Any
	then_part: Any
	else_part: Any

@dataclass(frozen=True)
class Lambda:
	params: tuple[str, ...]
	body: Any

@dataclass(frozen=True)
class Apply:
	fn_exp: Any
	args: tuple

@dataclass(frozen=True)
class Let:
	""" Parallel binding: every right-hand side sees only the outer scope. """
	bindings: tuple[tuple[str, Any], ...]
	body: Any

@dataclass(frozen=True)
class LetRec:
	""" Every right-hand side is a lambda, and they all see each other. """
	bindings: tuple[tuple[str, Any], ...]
	body: Any

@dataclass(frozen=True)
class Begin:
	exprs: tuple
	def __post_init__(self):
		if not self.exprs: raise ValueError("A begin-block needs at least one expression.")

@dataclass(frozen=True)
class Fix:
	fn_exp: Any

EXPRESSION = Union[Literal, Variable, BinaryOp, UnaryOp, If, Lambda, Apply, Let, LetRec, Begin, Fix]
VARIANTS = (Literal, Variable, BinaryOp, UnaryOp, If, Lambda, Apply, Let, LetRec, Begin, Fix)

def is_expression(it) -> bool:
	return type(it) in VARIANTS

# A few conveniences, mainly so test cases and hosts read less like tuple-soup.

def lam(params:Sequence[str], body) -> Lambda:
	return Lambda(tuple(params), body)

def call(fn_exp, *args) -> Apply:
	return Apply(fn_exp, tuple(args))

def let(pairs:Sequence[tuple[str, Any]], body) -> Let:
	return Let(tuple((name, expr) for name, expr in pairs), body)

def letrec(pairs:Sequence[tuple[str, Any]], body) -> LetRec:
	return LetRec(tuple((name, expr) for name, expr in pairs), body)

def begin(*exprs) -> Begin:
	return Begin(tuple(exprs))
