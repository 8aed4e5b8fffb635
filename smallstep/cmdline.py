"""
This is a small-step interpreter for SIMPLE, a minimal imperative language.

{0}

For example:

    smallstep loop

will run the "loop" specimen, showing every configuration along the way.

    smallstep -l

will list the specimens, and

    smallstep -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="smallstep",
	description="Small-step interpreter for the SIMPLE language.",
)
parser.add_argument("program", nargs="?", help="name of a specimen program; try 'factorial' for example.")
parser.add_argument('-l', "--list", action="store_true", help="List the specimen programs and stop.")
parser.add_argument('-q', "--quiet", action="store_true", help="Show only the final term and store, not every step.")
parser.add_argument('-s', "--set", action="append", default=[], metavar="NAME=VALUE", help="Put a number (or true/false) in the store before running. Repeatable.")

def _literal(text:str):
	from .syntax import Number, Boolean, INT64_MIN, INT64_MAX
	if text == "true": return Boolean(True)
	if text == "false": return Boolean(False)
	number = int(text)
	if not INT64_MIN <= number <= INT64_MAX: raise ValueError(text)
	return Number(number)

def run(args):
	from .specimens import CATALOG
	from .machine import Machine
	from .diagnostics import SimpleError, complain
	if args.list:
		for name, fn in CATALOG.items():
			print("%-12s %s"%(name, fn.__doc__.strip()))
		return 0
	if args.program not in CATALOG:
		print("I know no program called %r. Try -l for a list."%args.program, file=sys.stderr)
		return 2
	term, store = CATALOG[args.program]()
	for setting in args.set:
		name, _, text = setting.partition("=")
		try: store.assign(name.strip(), _literal(text.strip()))
		except ValueError:
			print("Can't make sense of %r as a setting."%setting, file=sys.stderr)
			return 2
	machine = Machine(term, store)
	try:
		machine.run(None if args.quiet else print)
	except SimpleError as ex:
		complain(ex, machine.term)
		return 1
	if args.quiet:
		print(machine.term)
	print(machine.store)
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
