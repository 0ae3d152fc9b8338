"""
# Runtime measurement of an engine's timestamp unit.

# Platforms are not obliged to count timestamps in seconds. The size of a day,
# an hour, and a second is measured by converting two civil date-times a known
# interval apart and differencing the resulting timestamps.

#!python
	one_second = calibrate.unit_size_for('second')
	ts += one_second * 30
"""
import functools
import dataclasses
from . import core
from . import system
from . import types

#: The measurable units; each names the record field advanced for the measurement.
units = ('day', 'hour', 'second')

def reference(Type=types.CivilDateTime):
	"""
	# Construct the record of &core.calibration_reference.
	"""
	return Type(*core.calibration_reference, types.Hint.unknown)

def represent(engine, civil) -> int:
	"""
	# Convert &civil using &engine, translating failures into &core.EnvironmentFault.
	"""
	try:
		return engine.represent(civil)
	except (OverflowError, ValueError, OSError) as err:
		raise core.EnvironmentFault('represent', "couldn't get calendar time for " + str(civil)) from err

def unit_size_for(unit, engine=None) -> int:
	"""
	# The number of timestamp units in one &unit according to the &engine.

	# [ Parameters ]
	# /unit/
		# One of `'day'`, `'hour'`, or `'second'`.
	# /engine/
		# The &abstract.Engine to measure. Defaults to &system.engine.
	"""
	if unit not in units:
		raise ValueError("unit must be one of " + ', '.join(map(repr, units)))

	engine = system.select(engine)
	datum = reference()
	datum_ts = represent(engine, datum)

	# The reference is chosen so that a single unit never overflows the field.
	later = datum.copy()
	setattr(later, unit, getattr(later, unit) + 1)
	later_ts = represent(engine, later)

	return later_ts - datum_ts

@dataclasses.dataclass(slots=True, eq=True, frozen=True)
class Calibration(object):
	"""
	# The measured sizes of a day, an hour, and a second in timestamp units.
	"""

	day: int
	hour: int
	second: int

	def consistent(self) -> bool:
		"""
		# Whether the measured units agree with each other.
		"""
		return self.day == core.hours_in_day * self.hour == core.seconds_in_day * self.second

@functools.lru_cache(16)
def measure(engine=None) -> Calibration:
	"""
	# Measure all units of &engine. Results are cached per engine.
	"""
	engine = system.select(engine)
	return Calibration(*[unit_size_for(unit, engine) for unit in units])
