"""
# Ordering and intraday differences of &types.CivilDateTime records.

# Only the calendar fields participate; the daylight saving hint is ignored.
"""
from . import core
from .types import Ordering

def compare(former, latter) -> Ordering:
	"""
	# Compare the calendar fields of &former with those of &latter.
	"""
	x = former.fields()
	y = latter.fields()

	if x < y:
		return Ordering.less
	elif x > y:
		return Ordering.greater
	else:
		return Ordering.equal

def intraday_diff(former, latter) -> int:
	"""
	# The seconds from &former to &latter as if both were on the same day,
	# wrapped to the nearest day boundary.

	#!python
		a = types.CivilDateTime.of(2023, 12, 31, 23)
		b = types.CivilDateTime.of(2024, 1, 1, 1)
		assert intraday_diff(a, b) == 7200

	# [ Parameters ]
	# /former/
		# The reference record.
	# /latter/
		# A record within twenty-four hours of &former.

	# ! WARNING:
		# Records further apart than a day produce a deterministic value that
		# does not measure the time between them.
	"""
	ordering = compare(former, latter)
	if ordering == Ordering.equal:
		return 0

	difference = (latter.hour - former.hour) * core.seconds_in_hour
	difference += (latter.minute - former.minute) * core.seconds_in_minute
	difference += (latter.second - former.second)

	if ordering == Ordering.greater and difference > 0:
		difference -= core.seconds_in_day
	elif ordering == Ordering.less and difference < 0:
		difference += core.seconds_in_day

	return difference
