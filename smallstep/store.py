"""
The store: where a SIMPLE program keeps its variables.

Names map to terminal terms only. Assignment is the one thing that writes here;
variable lookup and whoever inspects the result after a run are the readers.
Nothing ever gets deleted.
"""
from typing import Iterator, Mapping, Optional
from .syntax import Term, TERMINAL, is_reducible, DO_NOTHING
from .diagnostics import TypeMismatch

class Store:
	_bindings : dict[str, TERMINAL]

	def __init__(self, bindings:Optional[Mapping[str, TERMINAL]] = None):
		self._bindings = {}
		for name, term in (bindings or {}).items():
			self.assign(name, term)

	def holds(self, name:str) -> bool: return name in self._bindings
	def fetch(self, name:str) -> TERMINAL: return self._bindings[name]
	def lookup(self, name:str, default:TERMINAL = DO_NOTHING) -> TERMINAL:
		return self._bindings.get(name, default)

	def assign(self, name:str, term:Term) -> TERMINAL:
		assert isinstance(name, str), name
		if not isinstance(term, Term) or is_reducible(term):
			raise TypeMismatch(term, "Only finished values may be stored, not %s."%term)
		self._bindings[name] = term
		return term

	def snapshot(self) -> "Store":
		""" An independent copy: later assignments to either one do not show in the other. """
		return Store(self._bindings)

	def as_dict(self) -> dict[str, TERMINAL]:
		return dict(self._bindings)

	def __contains__(self, name): return name in self._bindings
	def __getitem__(self, name:str) -> TERMINAL: return self._bindings[name]
	def __len__(self): return len(self._bindings)
	def __iter__(self) -> Iterator[str]: return iter(self._bindings)
	def items(self): return self._bindings.items()

	def __eq__(self, other):
		return isinstance(other, Store) and self._bindings == other._bindings

	def __str__(self):
		return "{%s}"%", ".join("%s: %s"%(name, term) for name, term in self._bindings.items())

	def __repr__(self): return "<Store %s>"%self
