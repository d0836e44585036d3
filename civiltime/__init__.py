"""
[ About ]
---------

civiltime is a date and time package for exact proleptic Gregorian calendar
arithmetic and wall clock style time arithmetic. Dates convert to and from
signed day-counts relative to 1970-01-01, so arithmetic works the same
before and after the epoch and across every leap year rule.

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	import civiltime.library as libtime

[ Dates ]
---------

#!/pl/python
	d = libtime.Date.of(22, 6, 2024)
	assert d.weekday() == 6 # Saturday
	assert d.as_formatted_string('%A, %e %B %Y') == 'Saturday, 22 June 2024'

Invalid dates do not raise. They collapse into the sentinel, `Date.invalid`,
whose fields are all zero.

#!/pl/python
	assert libtime.Date.of(29, 2, 1985) == libtime.Date.invalid
	assert not libtime.Date.of(29, 2, 1985).valid

Use `Date.require` to get an exception instead.

Month and year arithmetic does not limit the day to the length of the
resulting month unless asked to.

#!/pl/python
	jan31 = libtime.Date.of(31, 1, 2024)
	assert tuple(jan31.add_months(1)) == (31, 2, 2024)
	assert jan31.add_months(1, validate=True) == libtime.Date.invalid

[ Times ]
---------

Times are used both as clock times and as signed durations; the hour
is never limited to a day.

#!/pl/python
	t = libtime.Time.from_seconds(9000)
	assert t == libtime.Time.of(2, 30, 0)
	assert libtime.Time.of(21, 30, 45).diff_in_seconds(libtime.Time.of(21, 29, 15)) == -90

[ Clocks ]
----------

The current date and time are read through a clock; the default is the
host's and can be replaced.

#!/pl/python
	libtime.install(libtime.Fixed(utc=1719057600))
	assert libtime.today() == libtime.Date.of(22, 6, 2024)
"""
__pkg_bottom__ = True
