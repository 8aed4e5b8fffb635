"""
The one-step rewrite relation of SIMPLE.

Each call to `reduce` performs exactly one rewrite: it finds the leftmost,
innermost place where a rule applies, rewrites just that, and hands back the
new term. The store is the only thing it may change along the way, and only
when an assignment finishes.

There is one rule-function per variant, named `_reduce_<variant>`.
They get collected into the REDUCE table at the bottom of the module.
"""
import operator
from typing import Callable
from . import syntax
from .syntax import (
	Term, Number, Boolean, Variable, Add, Multiply, LessThan,
	Assign, Sequence, IfElse, While, DoNothing, BinaryTerm,
	DO_NOTHING, is_reducible, value, render, INT64_MIN, INT64_MAX,
)
from .store import Store
from .diagnostics import TypeMismatch, UnhandledForm, Overflow

def reduce(term:Term, store:Store) -> Term:
	try: fn = REDUCE[type(term)]
	except KeyError: raise UnhandledForm(term, "No rule reduces %s."%_describe(term)) from None
	return fn(term, store)

def normalize(term:Term, store:Store) -> Term:
	""" Keep reducing until nothing is left to reduce. Does not return on a program that diverges. """
	while is_reducible(term):
		term = reduce(term, store)
	return term

def _describe(term) -> str:
	if isinstance(term, Term): return "%s %s"%(type(term).__name__, render(term))
	return repr(term)

###############################################################################

def _number(result:int, term:Term) -> Number:
	if INT64_MIN <= result <= INT64_MAX: return Number(result)
	raise Overflow(term, "The result of %s does not fit in 64 bits."%render(term))

def _binary(term:BinaryTerm, store:Store, combine:Callable[[int, int], Term]) -> Term:
	left, right = term.left, term.right
	if is_reducible(left): return type(term)(reduce(left, store), right)
	if is_reducible(right): return type(term)(left, reduce(right, store))
	return combine(value(left), value(right))

def _reduce_add(term:Add, store:Store):
	return _binary(term, store, lambda a, b: _number(operator.add(a, b), term))

def _reduce_multiply(term:Multiply, store:Store):
	return _binary(term, store, lambda a, b: _number(operator.mul(a, b), term))

def _reduce_less_than(term:LessThan, store:Store):
	return _binary(term, store, lambda a, b: Boolean(operator.lt(a, b)))

def _reduce_variable(term:Variable, store:Store):
	# A name that was never assigned reads as do-nothing.
	return store.lookup(term.name)

def _reduce_assign(term:Assign, store:Store):
	if is_reducible(term.expression):
		return Assign(term.name, reduce(term.expression, store))
	store.assign(term.name, term.expression)
	return DO_NOTHING

def _reduce_sequence(term:Sequence, store:Store):
	first = term.first
	if type(first) is DoNothing: return term.second
	if is_reducible(first): return Sequence(reduce(first, store), term.second)
	raise TypeMismatch(first, "Expected a statement before the ';', but found %s."%render(first))

def _reduce_if_else(term:IfElse, store:Store):
	condition = term.condition
	if type(condition) is Boolean:
		return term.consequence if condition.value else term.alternative
	if is_reducible(condition):
		return IfElse(reduce(condition, store), term.consequence, term.alternative)
	raise TypeMismatch(condition, "Expected a boolean condition, but found %s."%render(condition))

def _reduce_while(term:While, store:Store):
	return IfElse(term.condition, Sequence(term.body, term), DO_NOTHING)

def _reduce_do_nothing(term:DoNothing, store:Store):
	return term

###############################################################################

REDUCE = {}
for _k, _v in list(globals().items()):
	if _k.startswith("_reduce_"):
		_t = _v.__annotations__["term"]
		assert isinstance(_t, type), (_k, _t)
		REDUCE[_t] = _v

# Numbers and booleans are finished; no rule applies to them.
syntax.check_coverage(set(REDUCE) | {Number, Boolean}, "Reducer")
