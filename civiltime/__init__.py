"""
[ About ]
---------

civiltime is a calendar arithmetic package operating on broken-down civil
date-times rather than on timestamps. Records hold the year, month, day, hour,
minute, and second; the package validates them against the proleptic Gregorian
calendar, moves them by arbitrary quantities of days, hours, minutes, or seconds,
and converts UTC records into the timestamps of the host's calendar engine.

&.library will be referred to as `libcivil` throughout the examples in this documentation.

#!/pl/python
	from civiltime import library as libcivil

[ Records ]
-----------

Months are zero-based and years are relative to 1900, mirroring the C
library's broken-down time. &.library.CivilDateTime.of accepts the usual
absolute year and one-based month.

#!/pl/python
	dt = libcivil.CivilDateTime.of(year=1982, month=5, day=17)
	assert dt.year_offset == 82
	assert dt.month == 4

Records are not validated on construction.

#!/pl/python
	assert libcivil.validate(libcivil.CivilDateTime.of(2023, 2, 29)) == False
	assert libcivil.validate(libcivil.CivilDateTime.of(2024, 2, 29)) == True

[ Arithmetic ]
--------------

Arithmetic modifies the record in place, carrying overflow into the larger
units.

#!/pl/python
	dt = libcivil.CivilDateTime.of(1999, 12, 31, 23, 30)
	libcivil.increment_minute(dt, 90)
	assert str(dt) == '2000-01-01T01:00:00'

There is no year zero; the year preceding 1 is -1.

[ Timestamps ]
--------------

The unit of the host's timestamps is measured rather than assumed.

#!/pl/python
	assert libcivil.unit_size_for('day') == 24 * libcivil.unit_size_for('hour')

UTC records are converted with the host's local time conversion and corrected
until the host's UTC decomposition agrees.

#!/pl/python
	ts = libcivil.to_utc_timestamp(libcivil.CivilDateTime.of(2000, 1, 1))
	assert libcivil.check_timestamp(ts, libcivil.CivilDateTime.of(2000, 1, 1)) == (True, 0)
"""
