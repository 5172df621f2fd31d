"""
Where `say` sends things. The evaluator only ever calls `emit(expr)`;
a host picks whichever destination suits it.
"""
import sys
from .printer import render

class Console:
	def __init__(self, stream=None):
		self._stream = stream

	def emit(self, expr):
		stream = self._stream or sys.stdout
		stream.write(render(expr) + "\n")
		stream.flush()

class Recorder:
	""" Keeps everything said, in order. Handy for tests and embedding hosts. """
	def __init__(self):
		self.said = []
	def emit(self, expr):
		self.said.append(expr)

class Silence:
	def emit(self, expr):
		pass
