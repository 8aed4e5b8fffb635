import io
import unittest
from unittest import mock

from smallstep import cmdline, diagnostics
from smallstep.syntax import Number, Add

def _run(*argv):
	out, err = io.StringIO(), io.StringIO()
	with mock.patch("sys.stdout", out), mock.patch("sys.stderr", err):
		status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):

	def test_shows_every_step_then_the_store(self):
		status, out, err = _run("variables")
		self.assertEqual(0, status)
		self.assertEqual(["x + y", "3 + y", "3 + 4", "7", "{x: 3, y: 4}"], out.splitlines())
		self.assertEqual("", err)

	def test_quiet(self):
		status, out, _ = _run("-q", "assignment")
		self.assertEqual(0, status)
		self.assertEqual(["do-nothing", "{y: 1, x: 3, res: 42}"], out.splitlines())

	def test_settings_seed_the_store(self):
		status, out, _ = _run("-q", "-s", "n=4", "factorial")
		self.assertEqual(0, status)
		self.assertEqual("{n: 1, acc: 24}", out.splitlines()[-1])
		status, out, _ = _run("-q", "--set", "x=true", "--set", "y=2", "variables")
		self.assertEqual("3", out.splitlines()[0])

	def test_bad_setting(self):
		status, _, err = _run("-s", "n=lots", "factorial")
		self.assertEqual(2, status)
		self.assertIn("n=lots", err)

	def test_list(self):
		status, out, _ = _run("-l")
		self.assertEqual(0, status)
		for name in ["arithmetic", "loop", "factorial", "mismatch"]:
			self.assertIn(name, out)

	def test_unknown_program(self):
		status, _, err = _run("nonesuch")
		self.assertEqual(2, status)
		self.assertIn("nonesuch", err)

	def test_failure_complains(self):
		status, out, err = _run("mismatch")
		self.assertEqual(1, status)
		self.assertIn("TypeMismatch", err)
		self.assertIn("if (2) [ x = 1 ] else [ do-nothing ]", err)
		self.assertEqual("if (2) [ x = 1 ] else [ do-nothing ]", out.splitlines()[-1])

class ComplaintTests(unittest.TestCase):

	def test_culprit_outside_configuration(self):
		err = io.StringIO()
		term = Add(Number(1), Number(2))
		error = diagnostics.TypeMismatch(Number(5), "Just testing.")
		with mock.patch("sys.stderr", err):
			diagnostics.complain(error, term)
		self.assertIn("Just testing.", err.getvalue())
		self.assertIn("1 + 2", err.getvalue())

if __name__ == '__main__':
	unittest.main()
