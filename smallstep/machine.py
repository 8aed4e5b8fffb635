"""
The machine holds one configuration, a term plus a store, and steps it along
until the term is finished.
"""
from typing import Callable, Iterator, Optional
from .syntax import Term, is_reducible
from .store import Store
from .reducer import reduce
from .diagnostics import UnhandledForm

OBSERVER = Callable[[Term], object]

class Machine:
	term: Term
	store: Store
	steps: int

	def __init__(self, term:Term, store:Optional[Store] = None):
		self.term = term
		# The caller's own store, not a copy.
		self.store = Store() if store is None else store
		self.steps = 0

	@classmethod
	def with_empty_store(cls, term:Term) -> "Machine":
		return cls(term, Store())

	def current_term(self) -> Term: return self.term

	def snapshot_store(self) -> Store: return self.store.snapshot()

	def is_finished(self) -> bool: return not is_reducible(self.term)

	def step(self):
		if self.is_finished():
			raise UnhandledForm(self.term, "The machine has already halted at %s."%self.term)
		self.term = reduce(self.term, self.store)
		self.steps += 1

	def configurations(self) -> Iterator[Term]:
		""" Each configuration's term in turn, stepping in between, ending with the finished term. """
		while is_reducible(self.term):
			yield self.term
			self.step()
		yield self.term

	def run(self, observe:Optional[OBSERVER] = None) -> Term:
		for term in self.configurations():
			if observe is not None: observe(term)
		return self.term

	def __repr__(self): return "<Machine %r %s>"%(self.term, self.store)
