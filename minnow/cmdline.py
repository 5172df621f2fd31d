"""
This is an evaluator for the Minnow expression language.

{0}

Programs arrive as JSON expression trees. For example:

    minnow examples/factorial.json

will evaluate that program and print the result, or else try to explain why not.

    minnow -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="minnow",
	description="Evaluator for the Minnow expression language.",
)
parser.add_argument("program", help="a JSON expression tree; try examples/factorial.json for example.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is going on, on stderr.")
parser.add_argument('-q', "--quiet", action="store_true", help="Discard whatever the program says with `say`.")
parser.add_argument("--recursion-limit", type=int, default=None, help="Let deeply recursive programs go deeper than Python normally allows. The C stack still has its own limit, so a very large value can crash the interpreter outright instead of producing a report.")

def run(args):
	from .diagnostics import Report
	from . import codec, channels, evaluator, printer
	report = Report(verbose=args.verbose)
	path = Path.cwd() / args.program
	try:
		program = codec.load(path)
	except FileNotFoundError:
		report.no_such_file(path)
	except codec.MalformedExpression as ex:
		report.malformed_program(path, ex)
	except OSError as ex:
		report.broken_file(path, ex)
	if report.sick():
		report.complain_to_console()
		return 1
	if args.recursion_limit:
		sys.setrecursionlimit(args.recursion_limit)
	channel = channels.Silence() if args.quiet else channels.Console()
	try:
		report.info("Evaluating", printer.render(program))
		outcome = evaluator.evaluate(program, channel=channel)
	except RecursionError:
		report.ran_out_of_stack(sys.getrecursionlimit())
		report.complain_to_console()
		return 1
	if not outcome.ok:
		report.evaluation_failed(outcome.error)
		report.complain_to_console()
		return 1
	print(printer.show(outcome.value))
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
