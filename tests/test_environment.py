import unittest

from minnow import environment
from minnow.environment import null_env, lookup, extend, extend_recursive, root
from minnow.errors import UnboundVariable
from minnow.outcome import Success, Failure

class EnvironmentTests(unittest.TestCase):

	def test_null_env_knows_nothing(self):
		self.assertEqual(Failure(UnboundVariable("x")), lookup("x", null_env))
		self.assertEqual(0, null_env.depth())

	def test_extend_and_lookup(self):
		env = extend(null_env, [("x", 1), ("y", "why")])
		self.assertEqual(Success(1), lookup("x", env))
		self.assertEqual(Success("why"), lookup("y", env))
		self.assertEqual(Failure(UnboundVariable("z")), lookup("z", env))

	def test_search_goes_outward(self):
		outer = root(x=1, y=2)
		inner = extend(outer, [("y", 20)])
		innermost = extend(inner, [])
		self.assertEqual(Success(1), lookup("x", innermost))
		self.assertEqual(Success(20), lookup("y", innermost))
		self.assertEqual(3, innermost.depth())

	def test_extend_leaves_parent_alone(self):
		outer = root(x=1)
		extend(outer, [("x", 2), ("w", 3)])
		self.assertEqual(Success(1), lookup("x", outer))
		self.assertEqual(Failure(UnboundVariable("w")), lookup("w", outer))

	def test_later_duplicate_wins(self):
		env = extend(null_env, [("x", 1), ("x", 2)])
		self.assertEqual(Success(2), lookup("x", env))

	def test_frames_are_read_only(self):
		env = root(x=1)
		with self.assertRaises(TypeError):
			env.bindings["x"] = 2

	def test_frame_does_not_share_caller_dict(self):
		pairs = {"x": 1}
		env = extend(null_env, pairs.items())
		pairs["x"] = 2
		self.assertEqual(Success(1), lookup("x", env))

	def test_structural_equality(self):
		self.assertEqual(root(x=1), root(x=1))
		self.assertNotEqual(root(x=1), root(x=2))
		self.assertNotEqual(root(x=1), extend(root(y=0), [("x", 1)]))
		self.assertNotEqual(root(x=1), null_env)

	def test_root_without_bindings(self):
		self.assertIs(null_env, root())

	def test_recursive_frame(self):
		env = extend_recursive(null_env, ["a", "b"], lambda name, frame: (name, frame))
		a = lookup("a", env).value
		self.assertEqual("a", a[0])
		self.assertIs(env, a[1])
		self.assertIs(env, lookup("b", env).value[1])

	def test_module_functions_agree_with_methods(self):
		env = environment.root(q=5)
		self.assertEqual(env.resolve("q"), lookup("q", env))
		self.assertEqual(env.extend([("r", 6)]), extend(env, [("r", 6)]))

if __name__ == '__main__':
	unittest.main()
