"""
This module defines the specialized value-types that the evaluator operates in terms of.
Basic primitive values play themselves, but closures need more help.
"""
from typing import Union
from . import syntax
from .environment import Environment

class Closure:
	""" The run-time manifestation of a lambda: a callable value tied to its natal environment. """
	__slots__ = ("params", "body", "env")

	def __init__(self, params:tuple[str, ...], body:syntax.EXPRESSION, env:Environment):
		assert isinstance(env, Environment), type(env)
		object.__setattr__(self, "params", tuple(params))
		object.__setattr__(self, "body", body)
		object.__setattr__(self, "env", env)

	def __setattr__(self, key, value):
		raise AttributeError("Closures are immutable.")

	def arity(self) -> int: return len(self.params)

	def __eq__(self, other):
		# Same lambda, closed over the very same frame.
		if not isinstance(other, Closure): return NotImplemented
		return self.params == other.params and self.body == other.body and self.env is other.env

	def __hash__(self): return hash((self.params, id(self.env)))

	def __repr__(self): return "<Closure (%s)>" % ' '.join(self.params)

NATIVE_DATA = Union[bool, int, float, str]
VALUE = Union[NATIVE_DATA, Closure]

def is_number(it) -> bool:
	return isinstance(it, (int, float)) and not isinstance(it, bool)

def is_value(it) -> bool:
	return isinstance(it, (bool, int, float, str, Closure))

def same_value(a, b) -> bool:
	"""
	Equality as the language sees it. Booleans are not numbers here,
	although Python would happily say True == 1.
	"""
	if is_number(a) and is_number(b): return a == b
	if type(a) is not type(b): return False
	return a == b
