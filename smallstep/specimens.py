"""
A small zoo of ready-made SIMPLE programs.

There is no parser, so programs get built out of constructors.
Each specimen is a function returning a fresh (term, store) pair,
so nobody sees another run's assignments.
"""
from .syntax import (
	Number, Boolean, Variable, Add, Multiply, LessThan,
	Assign, Sequence, IfElse, While, DO_NOTHING,
)
from .store import Store

def arithmetic():
	""" 1 * 2 + 3 * 4 """
	term = Add(Multiply(Number(1), Number(2)), Multiply(Number(3), Number(4)))
	return term, Store()

def variables():
	""" x + y, with both already in the store """
	return Add(Variable("x"), Variable("y")), Store({"x": Number(3), "y": Number(4)})

def assignment():
	""" x = 3; res = 38 + x + y """
	term = Sequence(
		Assign("x", Number(3)),
		Assign("res", Add(Add(Number(38), Variable("x")), Variable("y"))),
	)
	return term, Store({"y": Number(1)})

def conditional():
	""" if (1 < 2) [ 1 ] else [ 2 ] """
	return IfElse(LessThan(Number(1), Number(2)), Number(1), Number(2)), Store()

def loop():
	""" Triple x until it reaches five. """
	term = While(
		LessThan(Variable("x"), Number(5)),
		Assign("x", Multiply(Variable("x"), Number(3))),
	)
	return term, Store({"x": Number(1)})

def factorial():
	""" Compute n! into acc, counting n down by adding minus one. """
	term = Sequence(
		Assign("acc", Number(1)),
		While(
			LessThan(Number(1), Variable("n")),
			Sequence(
				Assign("acc", Multiply(Variable("acc"), Variable("n"))),
				Assign("n", Add(Variable("n"), Number(-1))),
			),
		),
	)
	return term, Store({"n": Number(5)})

def undefined():
	""" Read a name nobody assigned. """
	return Assign("y", Variable("z")), Store()

def mismatch():
	""" An if-else whose condition turns out to be a number. """
	term = Sequence(
		Assign("flag", Boolean(True)),
		IfElse(Add(Variable("flag"), Number(1)), Assign("x", Number(1)), DO_NOTHING),
	)
	return term, Store()

CATALOG = {
	fn.__name__: fn
	for fn in (arithmetic, variables, assignment, conditional, loop, factorial, undefined, mismatch)
}
