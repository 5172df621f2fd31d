"""
Simplest possible environment concept.

This is the canonical list-structured search: each frame maps names to values
and links to the frame it was extended from. A frame never changes after it is
built, so any number of closures and inner frames may share it.
"""
from types import MappingProxyType
from typing import Any, Iterable, Callable, Mapping
import abc

from .errors import UnboundVariable
from .outcome import Success, Failure

class Environment(abc.ABC):
	@abc.abstractmethod
	def resolve(self, name:str):
		""" Return a Success with the innermost binding for name, or a Failure. """

	@abc.abstractmethod
	def depth(self) -> int:
		pass

	def extend(self, pairs:Iterable[tuple[str, Any]]) -> "InnerEnv":
		return InnerEnv(dict(pairs), self)

class NullEnv(Environment):
	""" Effectively the built-in scope, but with nothing built in. """
	def resolve(self, name:str):
		return Failure(UnboundVariable(name))
	def depth(self) -> int: return 0
	def __repr__(self): return "<null env>"

null_env = NullEnv()

class InnerEnv(Environment):
	def __init__(self, bindings:dict[str, Any], static_link:Environment):
		assert isinstance(static_link, Environment), type(static_link)
		self._bindings = MappingProxyType(bindings)
		self._static_link = static_link

	@property
	def bindings(self) -> Mapping[str, Any]: return self._bindings

	@property
	def static_link(self) -> Environment: return self._static_link

	def resolve(self, name:str):
		env = self
		while isinstance(env, InnerEnv):
			try: return Success(env._bindings[name])
			except KeyError: env = env._static_link
		return env.resolve(name)

	def depth(self) -> int:
		return 1 + self._static_link.depth()

	def __eq__(self, other):
		if not isinstance(other, InnerEnv): return NotImplemented
		return dict(self._bindings) == dict(other._bindings) and self._static_link == other._static_link

	__hash__ = None

	def __repr__(self):
		return "<env %s>" % ', '.join(sorted(self._bindings))

def lookup(name:str, env:Environment):
	return env.resolve(name)

def extend(env:Environment, pairs:Iterable[tuple[str, Any]]) -> InnerEnv:
	""" A fresh frame over env. If a name repeats, the later pair wins. """
	return env.extend(pairs)

def extend_recursive(env:Environment, names:Iterable[str], make_value:Callable[[str, InnerEnv], Any]) -> InnerEnv:
	"""
	One fresh frame in which every value may refer to the frame itself.
	The frame fills in before anyone else can see it.
	"""
	bindings = {}
	frame = InnerEnv(bindings, env)
	for name in names:
		bindings[name] = make_value(name, frame)
	return frame

def root(**bindings) -> Environment:
	return InnerEnv(bindings, null_env) if bindings else null_env
