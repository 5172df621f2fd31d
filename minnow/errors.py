"""
The things that can go wrong while evaluating a well-formed tree.
These are values, not exceptions: the evaluator hands them back inside a Failure.
"""
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class UnboundVariable:
	name: str
	def describe(self): return "There is no binding for %r in scope." % self.name

@dataclass(frozen=True)
class DivisionByZero:
	def describe(self): return "Division by zero."

@dataclass(frozen=True)
class NotCallable:
	value: Any
	def describe(self):
		from .printer import show
		return "Tried to call %s, which is not a function." % show(self.value)

@dataclass(frozen=True)
class UnknownOperator:
	""" Only a malformed tree can get here. """
	glyph: str
	def describe(self): return "Unknown operator: %s" % self.glyph

@dataclass(frozen=True)
class ArityMismatch:
	expected: int
	given: int
	def describe(self):
		plural = '' if self.expected == 1 else 's'
		return "This function takes %d argument%s, but got %d instead." % (self.expected, plural, self.given)

@dataclass(frozen=True)
class NotANumber:
	glyph: str
	value: Any
	def describe(self):
		from .printer import show
		return "Operator %s needs numbers, but got %s." % (self.glyph, show(self.value))

@dataclass(frozen=True)
class NotAFunction:
	name: str
	def describe(self): return "Recursive binding %r must be a lambda." % self.name

@dataclass(frozen=True)
class NumericOverflow:
	""" The answer is too big to represent, typically when a huge integer meets a float. """
	glyph: str
	def describe(self): return "The result of %s is too large to represent." % self.glyph

ERROR = (UnboundVariable, DivisionByZero, NotCallable, UnknownOperator, ArityMismatch, NotANumber, NotAFunction, NumericOverflow)
