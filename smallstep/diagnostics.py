"""
What goes wrong, and how to complain about it.

Every failure here means the program itself is malformed.
Nothing gets retried: the error climbs out of the reduction step,
and whoever asked for the run decides how loudly to complain.
"""
import sys, random
from boozetools.support.failureprone import illustration

class SimpleError(Exception):
	""" Root of the fatal conditions a SIMPLE program can run into. """
	def __init__(self, culprit, message:str):
		super().__init__(message)
		self.culprit = culprit
		self.message = message

class TypeMismatch(SimpleError):
	""" A rule needed a number, boolean, or statement, and got something else. """

class UnhandledForm(SimpleError):
	""" No rewrite rule applies to this shape of term. """

class Overflow(SimpleError):
	""" Arithmetic escaped the signed 64-bit range. """

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'This program has gone wrong.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

def complain(error:SimpleError, configuration):
	"""
	Emit a complaint to the console about a failed reduction step.
	The configuration is the term the machine was holding when the step failed;
	the culprit gets underlined wherever it appears within.
	"""
	from .syntax import render_with_spans
	text, spans = render_with_spans(configuration)
	print("*"*60, file=sys.stderr)
	print(_outburst(), file=sys.stderr)
	print("  -"*20, file=sys.stderr)
	print("%s: %s"%(type(error).__name__, error.message), file=sys.stderr)
	where = spans.get(id(error.culprit))
	if where is None:
		print(text, file=sys.stderr)
	else:
		width = max(where.stop - where.start, 1)
		print(illustration(text, where.start, width, prefix='step |', caption="here"), file=sys.stderr)
	sys.stderr.flush()
