"""
Gregorian calendar functions and data.
"""
from . import core

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: Zero-based index of February; the month with the leap exception.
february = month_names.index("february")

#: Zero-based index of December; the month with the year carry.
december = months_in_year - 1

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

def year_is_leap(y):
	"""
	Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(month, year, _tables=(calendar_year, calendar_leap)):
	"""
	The number of days in the zero-based &month of the absolute &year.
	"""
	return _tables[year_is_leap(year)][month]

def validate(record) -> bool:
	"""
	Whether the fields of &record identify an existing second.

	Leap seconds are not supported; a `second` of `60` is invalid.
	Neither is the absolute year zero, which designates an unset record.
	"""
	if record.year_offset == core.unset_year:
		return False
	if not (0 <= record.month < months_in_year):
		return False
	if record.day < 1 or record.day > days_in_month(record.month, record.year_offset + core.epoch_year):
		return False
	if not (0 <= record.hour < core.hours_in_day):
		return False
	if not (0 <= record.minute < core.minutes_in_hour):
		return False
	if not (0 <= record.second < core.seconds_in_minute):
		return False
	return True
