import unittest

from smallstep.store import Store
from smallstep.syntax import Number, Boolean, Add, Variable, DO_NOTHING
from smallstep.diagnostics import TypeMismatch

class StoreTests(unittest.TestCase):

	def test_starts_empty(self):
		store = Store()
		self.assertEqual(0, len(store))
		self.assertFalse(store.holds("x"))
		self.assertNotIn("x", store)

	def test_pre_populated(self):
		store = Store({"x": Number(3), "flag": Boolean(True)})
		self.assertEqual(Number(3), store.fetch("x"))
		self.assertEqual(Boolean(True), store["flag"])
		self.assertEqual(["x", "flag"], list(store))

	def test_assignment_overwrites(self):
		store = Store({"x": Number(3)})
		store.assign("x", Number(4))
		self.assertEqual({"x": Number(4)}, store.as_dict())

	def test_lookup_miss(self):
		store = Store()
		self.assertEqual(DO_NOTHING, store.lookup("z"))
		self.assertEqual(Number(0), store.lookup("z", Number(0)))
		with self.assertRaises(KeyError):
			store.fetch("z")

	def test_only_terminal_terms_are_stored(self):
		store = Store()
		for bogon in [Variable("x"), Add(Number(1), Number(2))]:
			with self.subTest(bogon):
				with self.assertRaises(TypeMismatch):
					store.assign("x", bogon)
		self.assertEqual(0, len(store))
		with self.assertRaises(TypeMismatch):
			Store({"y": Variable("x")})

	def test_do_nothing_may_be_stored(self):
		store = Store()
		store.assign("x", DO_NOTHING)
		self.assertEqual(DO_NOTHING, store["x"])

	def test_snapshot_is_independent(self):
		store = Store({"x": Number(1)})
		copy = store.snapshot()
		store.assign("x", Number(2))
		copy.assign("y", Number(3))
		self.assertEqual({"x": Number(2)}, store.as_dict())
		self.assertEqual({"x": Number(1), "y": Number(3)}, copy.as_dict())

	def test_rendering(self):
		self.assertEqual("{}", str(Store()))
		self.assertEqual("{x: 3, y: true}", str(Store({"x": Number(3), "y": Boolean(True)})))

if __name__ == '__main__':
	unittest.main()
