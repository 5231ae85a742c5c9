"""
This is an interpreter for the Zen programming language.

For example:

    zen program.zen

will run program.zen if possible, or else try to explain why not.

    zen

with no script starts an interactive prompt. End it with Ctrl-D.

    zen -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70

parser = argparse.ArgumentParser(
	prog="zen",
	description="Interpreter for the Zen programming language.",
)
parser.add_argument("script", nargs="*", help="a file of Zen source; leave it off for the prompt.")
parser.add_argument('-c', "--check", action="store_true", help="Scan and parse, but do not actually execute the program.")
parser.add_argument('-t', "--tokens", action="store_true", help="Print the scanned tokens instead of running.")
parser.add_argument('-a', "--ast", action="store_true", help="Print the parsed syntax tree instead of running.")
parser.add_argument('-v', "--verbose", action="count", help="Show where in the source each problem lies.")
parser.add_argument('-m', "--max-issues", type=int, default=None, help="Give up after this many issues.")

def run(args) -> int:
	from .diagnostics import Report, TooManyIssues
	from .interpreter import Interpreter
	if len(args.script) > 1:
		print(parser.format_usage().rstrip(), file=sys.stderr)
		return EX_USAGE
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	interpreter = Interpreter()
	if not args.script:
		return run_prompt(interpreter, report, args)
	path = Path.cwd() / args.script[0]
	try:
		text = path.read_text(encoding="utf-8")
	except UnicodeDecodeError:
		print("Something went pear-shaped while trying to read", path, file=sys.stderr)
		return EX_DATAERR
	except OSError:
		print("I see no file called", path, file=sys.stderr)
		return EX_USAGE
	try:
		process(text, interpreter, report, args, path)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
	if args.check and report.ok():
		print("Looks plausible to me.", file=sys.stderr)
	return exit_code(report)

def run_prompt(interpreter, report, args) -> int:
	from .diagnostics import TooManyIssues
	while True:
		try: line = input("> ")
		except EOFError:
			print()
			return 0
		try: process(line, interpreter, report, args)
		except TooManyIssues: report.complain_to_console()
		# Mistakes on one line must not block the next.
		report.reset()

def process(text, interpreter, report, args, path=None):
	from .front_end import scan_text, parse_text, run as run_text
	from .printer import render
	if args.tokens:
		for token in scan_text(text, report, path):
			print(token)
	elif args.ast or args.check:
		statements = parse_text(text, report, path)
		if args.ast and report.ok():
			for stmt in statements:
				print(render(stmt))
	else:
		run_text(text, interpreter, report, path)
	report.complain_to_console()

def exit_code(report) -> int:
	if report.had_static_error(): return EX_DATAERR
	if report.had_runtime_error(): return EX_SOFTWARE
	return 0

def main(argv=None):
	sys.exit(run(parser.parse_args(argv)))
