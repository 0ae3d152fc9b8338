"""
# Calendar engine access backed by the host's C library.

# [ Elements ]
# /engine/
	# The &Kernel instance used when a function's `engine` parameter is &None.
"""
import time
from . import abstract
from . import types

class Kernel(abstract.Engine):
	"""
	# &abstract.Engine implementation using the standard library's &time module.

	# Forward conversion uses `mktime`, interpreting records in the process' local zone;
	# decomposition uses `gmtime`. Timestamps are whatever integral unit the
	# host's `time_t` uses.
	"""
	__slots__ = ()

	def represent(self, civil, *, mktime=time.mktime) -> int:
		return int(mktime(civil.struct()))

	def decompose(self, timestamp, *, gmtime=time.gmtime):
		return types.CivilDateTime.from_struct(gmtime(timestamp))

	def now(self, *, time=time.time) -> int:
		return int(time())

engine = Kernel()

def select(engine_override=None):
	"""
	# Resolve the engine to use; &engine_override when given, otherwise &engine.
	"""
	return engine if engine_override is None else engine_override
