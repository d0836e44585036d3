"""
# Exceptions raised by the strict constructors.

# The value types signal invalid input with sentinel instances by default;
# these classes are only used where a caller explicitly asks for an error.
"""

class Error(Exception):
	"""
	# Base class for civiltime specific errors.
	"""

class InvalidDate(Error, ValueError):
	"""
	# The triple given to a strict &.types.Date constructor does not identify
	# a day on the Gregorian calendar.
	"""

	def __init__(self, day, month, year):
		self.day = day
		self.month = month
		self.year = year

	def __str__(self):
		return "no such date: day %r of month %r in year %r" % (self.day, self.month, self.year)

class InvalidTime(Error, ValueError):
	"""
	# The minute or second given to a strict &.types.Time constructor is outside
	# of the range `0` through `59`.
	"""

	def __init__(self, hour, minute, second):
		self.hour = hour
		self.minute = minute
		self.second = second

	def __str__(self):
		return "minute and second must be within [0, 60): %r:%r:%r" % (
			self.hour, self.minute, self.second
		)
