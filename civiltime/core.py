"""
# Shared constants and the fault hierarchy.

# [ Elements ]
# /epoch_year/
	# The absolute year that &types.CivilDateTime.year_offset is relative to.
# /unset_year/
	# The `year_offset` designating an unset record; absolute year zero.
# /calibration_reference/
	# The `(year_offset, month, day, hour, minute, second)` fields of the
	# point used to measure engine units. Early January is clear of
	# daylight saving transitions in all known zones.
"""

#: Absolute year of a zero `year_offset`.
epoch_year = 1900

#: Offset designating an unset record.
unset_year = -epoch_year

#: Unit moduli.
seconds_in_minute = 60
minutes_in_hour = 60
hours_in_day = 24

seconds_in_hour = seconds_in_minute * minutes_in_hour
seconds_in_day = seconds_in_hour * hours_in_day

#: 1930-01-02T12:00:00
calibration_reference = (30, 0, 2, 12, 0, 0)

class Fault(Exception):
	"""
	# Base class for failures identified at the engine boundary.

	# [ Properties ]
	# /operation/
		# The step that failed. `'represent'`, `'decompose'`, or `'reconcile'`.
	# /message/
		# Description of the failure.
	"""

	protocol = 'civiltime'

	def __init__(self, operation, message):
		self.operation = operation
		self.message = message
		super().__init__(operation, message)

	def __str__(self):
		return "{0}:{1}: {2}".format(self.protocol, self.operation, self.message)

class EnvironmentFault(Fault):
	"""
	# The platform calendar engine could not produce a timestamp or a decomposition.

	# The engine's exception is available as `__cause__`.
	"""

class DiscrepancyFault(Fault):
	"""
	# Reconciliation could not find a timestamp that decomposes into the requested record.

	# [ Properties ]
	# /timestamp/
		# The corrected estimate that failed verification.
	# /difference/
		# The seconds between the requested record and the decomposed estimate.
	"""

	def __init__(self, operation, message, timestamp, difference):
		super().__init__(operation, message)
		self.timestamp = timestamp
		self.difference = difference

class Critical(BaseException):
	"""
	# Control exception used to communicate that a fatal condition was identified.
	"""

	__kill__ = True

def panic(fault, /):
	"""
	# Raise a &Critical exception caused by &fault.

	# Hosts that treat engine failures as unrecoverable use this to
	# escalate past ordinary &Exception handlers.
	"""

	crit = Critical(str(fault))
	raise crit from fault
