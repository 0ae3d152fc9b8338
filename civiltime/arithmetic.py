"""
# Carry propagating arithmetic for &types.CivilDateTime records.

# The functions modify the given record in place and return the same object.
# Overflow of a field is carried into the next larger unit, and underflow borrows
# from it, so a single call may change every field of the record:

#!python
	dt = types.CivilDateTime.of(2023, 12, 31, 23, 59, 59)
	assert arithmetic.increment_second(dt, 1) is dt
	assert str(dt) == '2024-01-01T00:00:00'

# Negative quantities are delegated to the opposing operation.

# Records are not validated; invalid fields produce undefined results.
# Callers should use &.gregorian.validate prior to modification.

# [ Year Zero ]

# The absolute year zero does not exist. Advancing from December of year `-1`
# produces January of year `1`, and retreating from January of year `1`
# produces December of year `-1`.

# [ Elements ]
# /units/
	# The supported unit names ordered from largest to smallest.
# /increments/
	# Mapping of unit names to their increment function.
# /decrements/
	# Mapping of unit names to their decrement function.
"""
from . import core
from . import gregorian

def _month_length(record):
	return gregorian.days_in_month(record.month, record.year_offset + core.epoch_year)

def _advance_year(record):
	record.year_offset += 1
	if record.year_offset == core.unset_year:
		record.year_offset += 1

def _retreat_year(record):
	record.year_offset -= 1
	if record.year_offset == core.unset_year:
		record.year_offset -= 1

def _accumulate(record, field, modulus, quantity):
	# Apply the signed quantity to the field, leaving the remainder and
	# returning the whole units of the next larger field.
	carry, remainder = divmod(getattr(record, field) + quantity, modulus)
	setattr(record, field, remainder)
	return carry

def increment_day(record, quantity):
	"""
	# Add &quantity days to the &record, advancing the month and year as necessary.
	"""
	if quantity < 0:
		return decrement_day(record, -quantity)

	while quantity:
		remaining = _month_length(record) - record.day
		if quantity <= remaining:
			record.day += quantity
			break

		# Consume the rest of the month and the step onto the first of the next.
		quantity -= remaining + 1
		record.day = 1
		if record.month == gregorian.december:
			record.month = 0
			_advance_year(record)
		else:
			record.month += 1

	return record

def decrement_day(record, quantity):
	"""
	# Subtract &quantity days from the &record, retreating the month and year as necessary.
	"""
	if quantity < 0:
		return increment_day(record, -quantity)

	while quantity >= record.day:
		# Consume the days of the month and the step onto the last of the previous.
		quantity -= record.day
		if record.month == 0:
			record.month = gregorian.december
			_retreat_year(record)
		else:
			record.month -= 1
		record.day = _month_length(record)

	record.day -= quantity
	return record

def increment_hour(record, quantity):
	"""
	# Add &quantity hours to the &record, carrying whole days.
	"""
	if quantity < 0:
		return decrement_hour(record, -quantity)

	days = _accumulate(record, 'hour', core.hours_in_day, quantity)
	if days:
		increment_day(record, days)
	return record

def decrement_hour(record, quantity):
	"""
	# Subtract &quantity hours from the &record, borrowing whole days.
	"""
	if quantity < 0:
		return increment_hour(record, -quantity)

	days = -_accumulate(record, 'hour', core.hours_in_day, -quantity)
	if days:
		decrement_day(record, days)
	return record

def increment_minute(record, quantity):
	"""
	# Add &quantity minutes to the &record, carrying whole hours.
	"""
	if quantity < 0:
		return decrement_minute(record, -quantity)

	hours = _accumulate(record, 'minute', core.minutes_in_hour, quantity)
	if hours:
		increment_hour(record, hours)
	return record

def decrement_minute(record, quantity):
	"""
	# Subtract &quantity minutes from the &record, borrowing whole hours.
	"""
	if quantity < 0:
		return increment_minute(record, -quantity)

	hours = -_accumulate(record, 'minute', core.minutes_in_hour, -quantity)
	if hours:
		decrement_hour(record, hours)
	return record

def increment_second(record, quantity):
	"""
	# Add &quantity seconds to the &record, carrying whole minutes.
	"""
	if quantity < 0:
		return decrement_second(record, -quantity)

	minutes = _accumulate(record, 'second', core.seconds_in_minute, quantity)
	if minutes:
		increment_minute(record, minutes)
	return record

def decrement_second(record, quantity):
	"""
	# Subtract &quantity seconds from the &record, borrowing whole minutes.
	"""
	if quantity < 0:
		return increment_second(record, -quantity)

	minutes = -_accumulate(record, 'second', core.seconds_in_minute, -quantity)
	if minutes:
		decrement_minute(record, minutes)
	return record

units = ('day', 'hour', 'minute', 'second')

increments = {
	'day': increment_day,
	'hour': increment_hour,
	'minute': increment_minute,
	'second': increment_second,
}

decrements = {
	'day': decrement_day,
	'hour': decrement_hour,
	'minute': decrement_minute,
	'second': decrement_second,
}

def elapse(record, *, day=0, hour=0, minute=0, second=0):
	"""
	# Add the given quantities to &record, largest unit first.

	#!python
		arithmetic.elapse(dt, day=1, minute=30)
	"""
	for unit, quantity in zip(units, (day, hour, minute, second)):
		if quantity:
			increments[unit](record, quantity)
	return record

def rollback(record, *, day=0, hour=0, minute=0, second=0):
	"""
	# Subtract the given quantities from &record, largest unit first.
	"""
	for unit, quantity in zip(units, (day, hour, minute, second)):
		if quantity:
			decrements[unit](record, quantity)
	return record
