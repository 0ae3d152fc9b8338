"""
# Primary public module.

# Provides access to &CivilDateTime, the calendar arithmetic, and UTC reconciliation.

#!python
	from civiltime import library as libcivil

	dt = libcivil.CivilDateTime.of(2024, 2, 28, 23, 30)
	libcivil.increment_minute(dt, 90)
	assert str(dt) == '2024-02-29T01:00:00'
"""
__shortname__ = 'libcivil'

from .core import Fault, EnvironmentFault, DiscrepancyFault, Critical, panic
from .types import CivilDateTime, Hint, Ordering
from .gregorian import year_is_leap, days_in_month, validate
from .order import compare, intraday_diff
from .arithmetic import (
	increment_day, increment_hour, increment_minute, increment_second,
	decrement_day, decrement_hour, decrement_minute, decrement_second,
	elapse, rollback,
)
from .calibrate import unit_size_for, Calibration, measure
from .utc import to_utc_timestamp, check_timestamp, offset

is_leap_year = year_is_leap

def timestamp(year, month, day, hour=0, minute=0, second=0, *, engine=None) -> int:
	"""
	# Validate and reconcile the UTC date-time designated by the fields.

	# [ Parameters ]
	# /year/
		# The absolute year.
	# /month/
		# The one-based month.

	# [ Exceptions ]
	# /&ValueError/
		# The fields do not identify an existing second.
	"""
	civil = CivilDateTime.of(year, month, day, hour, minute, second)
	if not validate(civil):
		raise ValueError("invalid civil date-time: " + str(civil))
	return to_utc_timestamp(civil, engine)
