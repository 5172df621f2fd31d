from pathlib import Path
import unittest

from minnow import codec, syntax
from minnow.codec import MalformedExpression
from minnow.printer import render, show
from minnow.syntax import Literal, Variable, BinaryOp, UnaryOp, If, Lambda, Apply, Let, LetRec, Begin, Fix
from minnow.values import Closure
from minnow.environment import null_env

base_folder = Path(__file__).parent.parent
example_folder = base_folder/"examples"
zoo_fail = base_folder/"zoo/fail"

class DecodeTests(unittest.TestCase):

	def test_each_form(self):
		x = ["var", "x"]
		one = ["lit", 1]
		for data, expected in [
			(["lit", True], Literal(True)),
			(["lit", 2.5], Literal(2.5)),
			(["lit", "s"], Literal("s")),
			(x, Variable("x")),
			(["binop", "+", x, one], BinaryOp("+", Variable("x"), Literal(1))),
			(["unop", "zero?", x], UnaryOp("zero?", Variable("x"))),
			(["if", x, one, x], If(Variable("x"), Literal(1), Variable("x"))),
			(["lambda", ["x", "y"], x], Lambda(("x", "y"), Variable("x"))),
			(["apply", x, [one, x]], Apply(Variable("x"), (Literal(1), Variable("x")))),
			(["let", [["x", one]], x], Let((("x", Literal(1)),), Variable("x"))),
			(["letrec", [["x", one]], x], LetRec((("x", Literal(1)),), Variable("x"))),
			(["begin", [one, x]], Begin((Literal(1), Variable("x")))),
			(["fix", x], Fix(Variable("x"))),
		]:
			with self.subTest(data[0]):
				self.assertEqual(expected, codec.decode(data))

	def test_unknown_glyphs_survive_decoding(self):
		self.assertEqual(BinaryOp("%", Literal(1), Literal(2)), codec.decode(["binop", "%", ["lit", 1], ["lit", 2]]))

	def test_malformed(self):
		for bogon in [
			[],
			"x",
			5,
			["while", ["lit", True]],
			["if", ["lit", True], ["lit", 1]],
			["lit", None],
			["lit", [1, 2]],
			["var", ""],
			["var", 7],
			["lambda", "x", ["var", "x"]],
			["lambda", ["x", 3], ["var", "x"]],
			["apply", ["var", "f"], ["var", "x"]],
			["let", [["x"]], ["var", "x"]],
			["let", [[1, ["lit", 1]]], ["var", "x"]],
			["begin", []],
			["begin", ["lit", 1]],
			["binop", 5, ["lit", 1], ["lit", 2]],
			["fix", ["bogus"]],
			[["lit", 1]],
		]:
			with self.subTest(bogon):
				with self.assertRaises(MalformedExpression):
					codec.decode(bogon)

	def test_not_json(self):
		with self.assertRaises(MalformedExpression):
			codec.loads("(lambda (x) x)")

	def test_nested_too_deeply(self):
		depth = 5000
		text = '["unop", "not", ' * depth + '["lit", true]' + "]" * depth
		with self.assertRaises(MalformedExpression):
			codec.loads(text)

	def test_not_utf8(self):
		with self.assertRaises(MalformedExpression):
			codec.load(zoo_fail/"bad_encoding.json")

	def test_examples_survive_the_round_trip(self):
		for path in sorted(example_folder.glob("*.json")):
			with self.subTest(path.name):
				expr = codec.load(path)
				self.assertTrue(syntax.is_expression(expr))
				self.assertEqual(expr, codec.loads(codec.dumps(expr)))

class PrinterTests(unittest.TestCase):

	def test_render(self):
		expr = codec.load(example_folder/"factorial.json")
		self.assertEqual(
			"((fix (lambda (f) (lambda (n) (if (= n 0) 1 (* n (f (- n 1))))))) 5)",
			render(expr),
		)

	def test_render_binding_forms(self):
		expr = Let((("x", Literal("hi")), ("y", Literal(False))), Begin((UnaryOp("say", Variable("x")), Variable("y"))))
		self.assertEqual('(let ((x "hi") (y #f)) (begin (say x) y))', render(expr))
		expr = LetRec((("f", Lambda((), Literal(1))),), Apply(Variable("f"), ()))
		self.assertEqual("(letrec ((f (lambda () 1))) (f))", render(expr))

	def test_show(self):
		self.assertEqual("#t", show(True))
		self.assertEqual("3.5", show(3.5))
		self.assertEqual('"fish"', show("fish"))
		self.assertEqual("#<closure (a b)>", show(Closure(("a", "b"), Variable("a"), null_env)))
		self.assertEqual("'(+ 1 2)", show(BinaryOp("+", Literal(1), Literal(2))))

if __name__ == '__main__':
	unittest.main()
