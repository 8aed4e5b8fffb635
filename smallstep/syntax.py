"""
The terms of SIMPLE.

A term is at once a piece of syntax and a run-time configuration:
there is no separate value type, just the terms that cannot be reduced any further.
Every variant is an immutable node owning its children.

Several places dispatch on the variant: the reducibility table here,
the renderer below, and the rule table over in the reducer.
Each of them is checked against VARIANTS when its module loads,
so that a new variant cannot sneak past any of them.
"""
from typing import Union
from boozetools.support.foundation import Visitor
from .diagnostics import TypeMismatch

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class Term:
	""" Root of the closed family of term variants. """
	__slots__ = ()
	_fields = ()

	def __init__(self, *args):
		assert len(args) == len(self._fields), (type(self), args)
		for key, arg in zip(self._fields, args):
			object.__setattr__(self, key, arg)

	def __setattr__(self, key, value):
		raise AttributeError("%s terms are immutable."%type(self).__name__)

	def children(self) -> tuple:
		return tuple(getattr(self, key) for key in self._fields)

	def __eq__(self, other):
		return type(self) is type(other) and self.children() == other.children()

	def __hash__(self): return hash((type(self), self.children()))

	def __str__(self): return render(self)
	def __repr__(self): return "«%s»"%render(self)

class Number(Term):
	__slots__ = _fields = ("value",)
	value: int
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), value
		assert INT64_MIN <= value <= INT64_MAX, value
		super().__init__(value)

class Boolean(Term):
	__slots__ = _fields = ("value",)
	value: bool
	def __init__(self, value:bool):
		assert isinstance(value, bool), value
		super().__init__(value)

class Variable(Term):
	__slots__ = _fields = ("name",)
	name: str
	def __init__(self, name:str):
		assert isinstance(name, str), name
		super().__init__(name)

class BinaryTerm(Term):
	""" Arithmetic and comparison: both operands reduce left-to-right, then combine. """
	__slots__ = _fields = ("left", "right")
	left: Term
	right: Term
	def __init__(self, left:Term, right:Term):
		assert isinstance(left, Term) and isinstance(right, Term), (left, right)
		super().__init__(left, right)

class Add(BinaryTerm): __slots__ = ()
class Multiply(BinaryTerm): __slots__ = ()
class LessThan(BinaryTerm): __slots__ = ()

class Assign(Term):
	__slots__ = _fields = ("name", "expression")
	name: str
	expression: Term
	def __init__(self, name:str, expression:Term):
		assert isinstance(name, str), name
		assert isinstance(expression, Term), expression
		super().__init__(name, expression)

class Sequence(Term):
	__slots__ = _fields = ("first", "second")
	first: Term
	second: Term
	def __init__(self, first:Term, second:Term):
		assert isinstance(first, Term) and isinstance(second, Term), (first, second)
		super().__init__(first, second)

class IfElse(Term):
	__slots__ = _fields = ("condition", "consequence", "alternative")
	condition: Term
	consequence: Term
	alternative: Term
	def __init__(self, condition:Term, consequence:Term, alternative:Term):
		assert all(isinstance(t, Term) for t in (condition, consequence, alternative))
		super().__init__(condition, consequence, alternative)

class While(Term):
	__slots__ = _fields = ("condition", "body")
	condition: Term
	body: Term
	def __init__(self, condition:Term, body:Term):
		assert isinstance(condition, Term) and isinstance(body, Term), (condition, body)
		super().__init__(condition, body)

class DoNothing(Term):
	""" The unit: what a finished statement leaves behind. """
	__slots__ = ()

DO_NOTHING = DoNothing()

VARIANTS = (Number, Boolean, Variable, Add, Multiply, LessThan, Assign, Sequence, IfElse, While, DoNothing)

TERMINAL = Union[Number, Boolean, DoNothing]

###############################################################################

_REDUCIBLE = {
	Number: False,
	Boolean: False,
	DoNothing: False,
	Variable: True,
	Add: True,
	Multiply: True,
	LessThan: True,
	Assign: True,
	Sequence: True,
	IfElse: True,
	While: True,
}

def is_reducible(term:Term) -> bool:
	return _REDUCIBLE[type(term)]

def value(term:Term) -> int:
	"""
	Numbers stand for themselves and booleans count as one or zero,
	so the arithmetic rules need no separate coercion step.
	Nothing goes the other way: a number is never taken for a boolean.
	"""
	if type(term) is Number: return term.value
	if type(term) is Boolean: return int(term.value)
	raise TypeMismatch(term, "Expected a number or boolean, but found %s."%render(term))

def check_coverage(table, what:str):
	""" Assert that some dispatch table covers exactly the variants of SIMPLE. """
	missing = [v.__name__ for v in VARIANTS if v not in table]
	extra = [k for k in table if k not in VARIANTS]
	assert not (missing or extra), "%s: missing %r; unexpected %r"%(what, missing, extra)

###############################################################################

class Render(Visitor):
	"""
	Produce the canonical text of a term.
	Along the way, remember where each subterm's text lands,
	so that a complaint can underline the part of a configuration at fault.
	"""

	def __init__(self):
		self._parts = []
		self._width = 0
		self.spans = {}

	def text(self) -> str:
		return ''.join(self._parts)

	def emit(self, text:str):
		self._parts.append(text)
		self._width += len(text)

	def show(self, term:Term):
		start = self._width
		self.visit(term)
		self.spans.setdefault(id(term), slice(start, self._width))

	def visit_Number(self, term:Number): self.emit(str(term.value))
	def visit_Boolean(self, term:Boolean): self.emit("true" if term.value else "false")
	def visit_Variable(self, term:Variable): self.emit(term.name)
	def visit_DoNothing(self, term:DoNothing): self.emit("do-nothing")

	def _infix(self, term:BinaryTerm, glyph:str):
		self.show(term.left)
		self.emit(glyph)
		self.show(term.right)

	def visit_Add(self, term:Add): self._infix(term, " + ")
	def visit_Multiply(self, term:Multiply): self._infix(term, " * ")
	def visit_LessThan(self, term:LessThan): self._infix(term, " < ")

	def visit_Assign(self, term:Assign):
		self.emit(term.name + " = ")
		self.show(term.expression)

	def visit_Sequence(self, term:Sequence):
		self.show(term.first)
		self.emit("; ")
		self.show(term.second)

	def visit_IfElse(self, term:IfElse):
		self.emit("if (")
		self.show(term.condition)
		self.emit(") [ ")
		self.show(term.consequence)
		self.emit(" ] else [ ")
		self.show(term.alternative)
		self.emit(" ]")

	def visit_While(self, term:While):
		self.emit("while (")
		self.show(term.condition)
		self.emit(") [ ")
		self.show(term.body)
		self.emit(" ]")

check_coverage({v for v in VARIANTS if hasattr(Render, "visit_"+v.__name__)}, "Render")
check_coverage(_REDUCIBLE, "Reducibility")

def render(term:Term) -> str:
	r = Render()
	r.show(term)
	return r.text()

def render_with_spans(term:Term) -> tuple[str, dict[int, slice]]:
	""" The canonical text, plus the span of each subterm keyed by the subterm's id. """
	r = Render()
	r.show(term)
	return r.text(), r.spans
