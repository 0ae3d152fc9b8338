"""
# Civil date-time record and associated enumerations.

#!python
	leapday = types.CivilDateTime.of(year=2024, month=2, day=29)
	assert leapday.year_offset == 124
	assert leapday.month == 1

# Records are mutable; the functions in &.arithmetic modify the record
# they are given and return the same object.
"""
import enum
import dataclasses
from . import core

class Hint(enum.IntEnum):
	"""
	# Daylight saving hint consumed by engines during forward conversion.

	# [ Elements ]
	# /unknown/
		# The engine decides whether daylight saving is in effect.
	# /inactive/
		# Standard time.
	# /active/
		# Daylight saving time.
	"""

	unknown = -1
	inactive = 0
	active = +1

class Ordering(enum.IntEnum):
	"""
	# Result of &.order.compare.
	"""

	less = -1
	equal = 0
	greater = +1

@dataclasses.dataclass(slots=True)
class CivilDateTime(object):
	"""
	# Broken-down civil date and time.

	# [ Properties ]
	# /year_offset/
		# Years relative to &core.epoch_year. May be negative.
	# /month/
		# Zero-based month of the year; January is `0`.
	# /day/
		# One-based day of the month.
	# /hour/
		# `0` through `23`.
	# /minute/
		# `0` through `59`.
	# /second/
		# `0` through `59`. `60` is representable, but never valid.
	# /dst/
		# The &Hint given to engines. Ignored by comparison and arithmetic.
	"""

	year_offset: int = core.unset_year
	month: int = 0
	day: int = 1
	hour: int = 0
	minute: int = 0
	second: int = 0
	dst: Hint = Hint.unknown

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, dst=Hint.unknown):
		"""
		# Construct a record from an absolute &year and a one-based &month.
		"""

		return Class(year - core.epoch_year, month - 1, day, hour, minute, second, Hint(dst))

	@classmethod
	def from_struct(Class, st):
		"""
		# Construct a record from a &time.struct_time or a nine element tuple
		# in the same layout.
		"""

		return Class(
			st[0] - core.epoch_year, st[1] - 1, st[2],
			st[3], st[4], st[5],
			Hint(max(-1, min(1, st[8]))),
		)

	@property
	def year(self) -> int:
		"""
		# The absolute year.
		"""
		return self.year_offset + core.epoch_year

	def fields(self):
		"""
		# The calendar fields in comparison priority.
		"""
		return (self.year_offset, self.month, self.day, self.hour, self.minute, self.second)

	def struct(self):
		"""
		# The record in &time.struct_time layout.

		# The weekday and day of year are `-1`; engines calculate them.
		"""
		return (
			self.year, self.month + 1, self.day,
			self.hour, self.minute, self.second,
			-1, -1, int(self.dst),
		)

	def copy(self):
		return dataclasses.replace(self)

	def __str__(self):
		return "{0:04}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}".format(
			self.year, self.month + 1, self.day,
			self.hour, self.minute, self.second,
		)
