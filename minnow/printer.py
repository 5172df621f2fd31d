"""
Render expressions back into the parenthesized surface notation,
and values into something a person can read at the console.
"""
import json
from boozetools.support.foundation import Visitor
from . import syntax
from .values import Closure

def _atom(value) -> str:
	if isinstance(value, bool): return "#t" if value else "#f"
	if isinstance(value, str): return json.dumps(value)
	return repr(value)

class Printer(Visitor):
	def visit_Literal(self, expr:syntax.Literal): return _atom(expr.value)
	def visit_Variable(self, expr:syntax.Variable): return expr.name

	def visit_BinaryOp(self, expr:syntax.BinaryOp):
		return "(%s %s %s)" % (expr.glyph, self.visit(expr.lhs), self.visit(expr.rhs))

	def visit_UnaryOp(self, expr:syntax.UnaryOp):
		return "(%s %s)" % (expr.glyph, self.visit(expr.arg))

	def visit_If(self, expr:syntax.If):
		parts = expr.if_part, expr.then_part, expr.else_part
		return "(if %s)" % ' '.join(map(self.visit, parts))

	def visit_Lambda(self, expr:syntax.Lambda):
		return "(lambda (%s) %s)" % (' '.join(expr.params), self.visit(expr.body))

	def visit_Apply(self, expr:syntax.Apply):
		return "(%s)" % ' '.join(self.visit(x) for x in (expr.fn_exp, *expr.args))

	def _bindings(self, keyword, expr):
		clauses = ' '.join("(%s %s)" % (name, self.visit(x)) for name, x in expr.bindings)
		return "(%s (%s) %s)" % (keyword, clauses, self.visit(expr.body))

	def visit_Let(self, expr:syntax.Let): return self._bindings("let", expr)
	def visit_LetRec(self, expr:syntax.LetRec): return self._bindings("letrec", expr)

	def visit_Begin(self, expr:syntax.Begin):
		return "(begin %s)" % ' '.join(map(self.visit, expr.exprs))

	def visit_Fix(self, expr:syntax.Fix): return "(fix %s)" % self.visit(expr.fn_exp)

_printer = Printer()

def render(expr:syntax.EXPRESSION) -> str:
	return _printer.visit(expr)

def show(value) -> str:
	""" Values as the console shows them. A quoted expression (from `say`) gets a leading tick. """
	if isinstance(value, Closure):
		return "#<closure (%s)>" % ' '.join(value.params)
	if syntax.is_expression(value):
		return "'" + render(value)
	return _atom(value)
