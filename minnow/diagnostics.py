"""
How Minnow talks to a person about trouble.
Everything goes to stderr; the program's own output keeps stdout to itself.
"""
import sys, random
from pathlib import Path
from traceback import format_exception_only

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Jeepers',
		'Nuts', 'Rats', 'Snap', 'Woe is me',
	]

	resignations = [
		'I cannot continue.',
		'The evaluation went no further.',
		'I have no idea what the right answer is.',
		'Something is fishy in this program.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Pic:
	""" One issue: an intro line, and perhaps a few lines more. """
	def __init__(self, intro:str, footer=()):
		self._intro, self._footer = intro, list(footer)
	@property
	def intro(self): return self._intro
	def as_text(self):
		return '\n'.join([self._intro, *self._footer])

class Report:
	""" Collects issues for a host to show whenever it pleases. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command line calls while loading a program:

	def no_such_file(self, path:Path):
		self.issue(Pic("I see no file called "+str(path)))

	def broken_file(self, path:Path, ex:Exception):
		intro = "Something went pear-shaped while trying to read "+str(path)
		self.issue(Pic(intro, [''.join(format_exception_only(type(ex), ex)).rstrip()]))

	def malformed_program(self, path:Path, ex:Exception):
		intro = "The expression tree in %s is not well-formed."%path
		self.issue(Pic(intro, [str(ex)]))

	# Methods the command line calls after evaluation:

	def evaluation_failed(self, error):
		intro = "Evaluation failed with %s."%type(error).__name__
		self.issue(Pic(intro, [error.describe()]))

	def ran_out_of_stack(self, limit:int):
		intro = "Evaluation recursed deeper than Python allows (limit %d)."%limit
		footer = ["A runaway fix, perhaps? Or try a larger --recursion-limit."]
		self.issue(Pic(intro, footer))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
