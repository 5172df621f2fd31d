"""
Expression trees travel as JSON, in tagged arrays:

	["lit", 5]                       ["var", "x"]
	["binop", "+", lhs, rhs]         ["unop", "zero?", arg]
	["if", cond, then, else]         ["lambda", ["x", "y"], body]
	["apply", fn, [arg, ...]]        ["let", [["x", expr], ...], body]
	["letrec", [["f", lambda], ...], body]
	["begin", [expr, ...]]           ["fix", fn]

Each tag has exactly one shape. Whatever does not fit is rejected here,
at the producer's doorstep, so the evaluator only ever sees well-formed trees.
"""
import json
from pathlib import Path
from boozetools.support.foundation import Visitor
from . import syntax

class MalformedExpression(ValueError):
	pass

def _fail(data, why):
	raise MalformedExpression("%s: %s" % (why, json.dumps(data)[:60]))

def _name(data) -> str:
	if not isinstance(data, str) or not data: _fail(data, "Expected a name")
	return data

def _list(data, why) -> list:
	if not isinstance(data, list): _fail(data, why)
	return data

def _glyph(data):
	# Unknown glyphs are still representable; the evaluator reports them.
	if not isinstance(data, str): _fail(data, "Expected an operator glyph")
	return data

def _bindings(data):
	pairs = []
	for clause in _list(data, "Expected a list of bindings"):
		if not isinstance(clause, list) or len(clause) != 2: _fail(clause, "Expected [name, expression]")
		pairs.append((_name(clause[0]), decode(clause[1])))
	return tuple(pairs)

def _decode_lit(value):
	if isinstance(value, (bool, int, float, str)): return syntax.Literal(value)
	_fail(value, "Literals are booleans, numbers, or strings")

def _decode_begin(exprs):
	exprs = _list(exprs, "Expected a list of expressions")
	if not exprs: _fail(exprs, "A begin-block needs at least one expression")
	return syntax.Begin(tuple(map(decode, exprs)))

DECODE = {
	"lit": _decode_lit,
	"var": lambda name: syntax.Variable(_name(name)),
	"binop": lambda glyph, lhs, rhs: syntax.BinaryOp(_glyph(glyph), decode(lhs), decode(rhs)),
	"unop": lambda glyph, arg: syntax.UnaryOp(_glyph(glyph), decode(arg)),
	"if": lambda c, t, e: syntax.If(decode(c), decode(t), decode(e)),
	"lambda": lambda params, body: syntax.Lambda(tuple(map(_name, _list(params, "Expected a parameter list"))), decode(body)),
	"apply": lambda fn, args: syntax.Apply(decode(fn), tuple(map(decode, _list(args, "Expected an argument list")))),
	"let": lambda bindings, body: syntax.Let(_bindings(bindings), decode(body)),
	"letrec": lambda bindings, body: syntax.LetRec(_bindings(bindings), decode(body)),
	"begin": _decode_begin,
	"fix": lambda fn: syntax.Fix(decode(fn)),
}

ARITY = {"lit": 1, "var": 1, "binop": 3, "unop": 2, "if": 3, "lambda": 2, "apply": 2, "let": 2, "letrec": 2, "begin": 1, "fix": 1}

def decode(data) -> syntax.EXPRESSION:
	if not isinstance(data, list) or not data: _fail(data, "Expected a tagged array")
	tag, *fields = data
	try: fn = DECODE[tag]
	except (KeyError, TypeError): _fail(data, "Unknown tag")
	if len(fields) != ARITY[tag]:
		_fail(data, "Tag %r takes %d field(s), not %d" % (tag, ARITY[tag], len(fields)))
	return fn(*fields)

class Encoder(Visitor):
	def visit_Literal(self, expr:syntax.Literal): return ["lit", expr.value]
	def visit_Variable(self, expr:syntax.Variable): return ["var", expr.name]
	def visit_BinaryOp(self, expr:syntax.BinaryOp): return ["binop", expr.glyph, self.visit(expr.lhs), self.visit(expr.rhs)]
	def visit_UnaryOp(self, expr:syntax.UnaryOp): return ["unop", expr.glyph, self.visit(expr.arg)]
	def visit_If(self, expr:syntax.If):
		return ["if", self.visit(expr.if_part), self.visit(expr.then_part), self.visit(expr.else_part)]
	def visit_Lambda(self, expr:syntax.Lambda): return ["lambda", list(expr.params), self.visit(expr.body)]
	def visit_Apply(self, expr:syntax.Apply): return ["apply", self.visit(expr.fn_exp), [self.visit(a) for a in expr.args]]
	def visit_Let(self, expr:syntax.Let): return ["let", self._bindings(expr), self.visit(expr.body)]
	def visit_LetRec(self, expr:syntax.LetRec): return ["letrec", self._bindings(expr), self.visit(expr.body)]
	def visit_Begin(self, expr:syntax.Begin): return ["begin", [self.visit(x) for x in expr.exprs]]
	def visit_Fix(self, expr:syntax.Fix): return ["fix", self.visit(expr.fn_exp)]

	def _bindings(self, expr):
		return [[name, self.visit(x)] for name, x in expr.bindings]

_encoder = Encoder()

def encode(expr:syntax.EXPRESSION) -> list:
	return _encoder.visit(expr)

def loads(text:str) -> syntax.EXPRESSION:
	try:
		return decode(json.loads(text))
	except json.JSONDecodeError as ex:
		raise MalformedExpression("Not JSON: %s" % ex) from ex
	except RecursionError as ex:
		raise MalformedExpression("Nested too deeply to read") from ex

def load(path:Path) -> syntax.EXPRESSION:
	with open(path, "r", encoding="utf-8") as fh:
		try: text = fh.read()
		except UnicodeDecodeError as ex: raise MalformedExpression("Not UTF-8 text: %s" % ex) from ex
	return loads(text)

def dumps(expr:syntax.EXPRESSION) -> str:
	return json.dumps(encode(expr))
