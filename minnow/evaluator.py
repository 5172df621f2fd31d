"""
Call-By-Value with Direct Interpretation.

Every visit returns a Success or a Failure. Composite forms stop at the first
Failure from a sub-expression and hand back that very Failure, untouched.
Nothing here mutates an expression, an environment, or a value.

Recursion depth follows the nesting of the tree plus the depth of the call
chain. A runaway `fix` can exhaust Python's stack; that surfaces as an ordinary
RecursionError for the host to deal with, since there is no sensible
language-level answer.
"""
import operator
from typing import Sequence
from boozetools.support.foundation import Visitor
from . import syntax
from .environment import Environment, null_env, lookup, extend, extend_recursive
from .errors import DivisionByZero, NotCallable, UnknownOperator, ArityMismatch, NotANumber, NotAFunction, NumericOverflow
from .outcome import Success, Failure
from .values import Closure, is_number, same_value
from .channels import Console

def _arithmetic(fn):
	def apply(glyph, lhs, rhs):
		for operand in lhs, rhs:
			if not is_number(operand): return Failure(NotANumber(glyph, operand))
		try: return Success(fn(lhs, rhs))
		except OverflowError: return Failure(NumericOverflow(glyph))
	return apply

def _divide(glyph, lhs, rhs):
	for operand in lhs, rhs:
		if not is_number(operand): return Failure(NotANumber(glyph, operand))
	if rhs == 0: return Failure(DivisionByZero())
	try: return Success(lhs / rhs)
	except OverflowError: return Failure(NumericOverflow(glyph))

def _equal(glyph, lhs, rhs):
	return Success(same_value(lhs, rhs))

BINARY = {
	"+": _arithmetic(operator.add),
	"-": _arithmetic(operator.sub),
	"*": _arithmetic(operator.mul),
	"/": _divide,
	"=": _equal,
}

UNARY = {
	# Only exactly True counts as true, same as in `if`.
	"not": lambda value: value is not True,
	"zero?": lambda value: is_number(value) and value == 0,
}

def fixed_point(fn_exp) -> syntax.Apply:
	"""
	The applicative-order fixed-point combinator, applied to fn_exp:

		((lambda (f) ((lambda (x) (f (lambda (v) ((x x) v))))
		              (lambda (x) (f (lambda (v) ((x x) v))))))
		 fn_exp)

	The eta-expansion around (x x) keeps call-by-value from diverging.
	The combinator is a closed term, so its own names cannot capture anything.
	"""
	x, f, v = syntax.Variable("x"), syntax.Variable("f"), syntax.Variable("v")
	self_apply = syntax.call(syntax.call(x, x), v)
	wrapper = syntax.lam(["x"], syntax.call(f, syntax.lam(["v"], self_apply)))
	combinator = syntax.lam(["f"], syntax.call(wrapper, wrapper))
	return syntax.call(combinator, fn_exp)

class Evaluator(Visitor):
	def __init__(self, channel=None):
		self._channel = Console() if channel is None else channel

	def evaluate(self, expr:syntax.EXPRESSION, env:Environment):
		return self.visit(expr, env)

	def evaluate_all(self, exprs:Sequence[syntax.EXPRESSION], env:Environment):
		""" Success with every value in order, or else the first Failure. """
		values = []
		for expr in exprs:
			outcome = self.visit(expr, env)
			if not outcome.ok: return outcome
			values.append(outcome.value)
		return Success(values)

	def visit_Literal(self, expr:syntax.Literal, env:Environment):
		return Success(expr.value)

	def visit_Variable(self, expr:syntax.Variable, env:Environment):
		return lookup(expr.name, env)

	def visit_BinaryOp(self, expr:syntax.BinaryOp, env:Environment):
		try: op = BINARY[expr.glyph]
		except KeyError: return Failure(UnknownOperator(expr.glyph))
		lhs = self.visit(expr.lhs, env)
		if not lhs.ok: return lhs
		rhs = self.visit(expr.rhs, env)
		if not rhs.ok: return rhs
		return op(expr.glyph, lhs.value, rhs.value)

	def visit_UnaryOp(self, expr:syntax.UnaryOp, env:Environment):
		if expr.glyph == "say":
			# The operand goes out as written, and comes back as the result.
			self._channel.emit(expr.arg)
			return Success(expr.arg)
		try: op = UNARY[expr.glyph]
		except KeyError: return Failure(UnknownOperator(expr.glyph))
		arg = self.visit(expr.arg, env)
		if not arg.ok: return arg
		return Success(op(arg.value))

	def visit_If(self, expr:syntax.If, env:Environment):
		if_part = self.visit(expr.if_part, env)
		if not if_part.ok: return if_part
		sequel = expr.then_part if if_part.value is True else expr.else_part
		return self.visit(sequel, env)

	def visit_Lambda(self, expr:syntax.Lambda, env:Environment):
		return Success(Closure(expr.params, expr.body, env))

	def visit_Apply(self, expr:syntax.Apply, env:Environment):
		callee = self.visit(expr.fn_exp, env)
		if not callee.ok: return callee
		closure = callee.value
		if not isinstance(closure, Closure): return Failure(NotCallable(closure))
		args = self.evaluate_all(expr.args, env)
		if not args.ok: return args
		if len(args.value) != closure.arity():
			return Failure(ArityMismatch(closure.arity(), len(args.value)))
		inner = extend(closure.env, zip(closure.params, args.value))
		return self.visit(closure.body, inner)

	def visit_Let(self, expr:syntax.Let, env:Environment):
		pairs = []
		for name, sub in expr.bindings:
			outcome = self.visit(sub, env)
			if not outcome.ok: return outcome
			pairs.append((name, outcome.value))
		return self.visit(expr.body, extend(env, pairs))

	def visit_LetRec(self, expr:syntax.LetRec, env:Environment):
		lambdas = {}
		for name, sub in expr.bindings:
			if not isinstance(sub, syntax.Lambda): return Failure(NotAFunction(name))
			lambdas[name] = sub
		def make_closure(name, frame):
			return Closure(lambdas[name].params, lambdas[name].body, frame)
		return self.visit(expr.body, extend_recursive(env, lambdas, make_closure))

	def visit_Begin(self, expr:syntax.Begin, env:Environment):
		outcome = None
		for sub in expr.exprs:
			outcome = self.visit(sub, env)
			if not outcome.ok: break
		return outcome

	def visit_Fix(self, expr:syntax.Fix, env:Environment):
		return self.visit(fixed_point(expr.fn_exp), env)

def evaluate(expr:syntax.EXPRESSION, env:Environment=null_env, channel=None):
	return Evaluator(channel).evaluate(expr, env)

def evaluate_all(exprs:Sequence[syntax.EXPRESSION], env:Environment=null_env, channel=None):
	return Evaluator(channel).evaluate_all(exprs, env)
