"""
# Calendar date and clock time value types.

#!python
	d = types.Date.of(22, 6, 2024)
	assert d.add_days(10).as_string() == '2024-07-02'

	t = types.Time.of(18, 0, 0)
	assert t.add_minutes(30) == types.Time.of(18, 30, 0)

# Invalid input does not raise. Constructors collapse to the sentinel instances,
# &Date.invalid and &Time.invalid, that callers compare against or check using
# the `valid` property; `set` refuses to modify them. The `require`
# constructors raise instead.

# [ Elements ]
# /Date/
	# Proleptic Gregorian date; day, month, and year.
# /Time/
	# Hour, minute, and second; used as a time of day and as a signed duration.
"""
import functools

from . import core
from . import gregorian
from . import week
from . import format
from . import system

@functools.total_ordering
class Date(object):
	"""
	# A day on the proleptic Gregorian calendar.

	# Arithmetic methods return new instances; only &set modifies the instance.
	"""
	__slots__ = ('day', 'month', 'year')

	#: The sentinel representing an invalid date; assigned after the class is defined.
	invalid = None

	def __init__(self, day=1, month=1, year=0):
		if not gregorian.date_is_valid(day, month, year):
			day, month, year = 0, 0, 0

		self.day = day
		self.month = month
		self.year = year

	@classmethod
	def _construct(Class, day, month, year):
		# Bypass validation.
		d = Class.__new__(Class)
		d.day = day
		d.month = month
		d.year = year
		return d

	@classmethod
	def of(Class, day, month, year):
		"""
		# Create a date from the given fields. &invalid is returned
		# when the fields do not identify a day on the calendar.
		"""
		return Class(day, month, year)

	@classmethod
	def require(Class, day, month, year):
		"""
		# Create a date from the given fields.

		# [ Exceptions ]
		# /&core.InvalidDate/
			# The fields do not identify a day on the calendar.
		"""
		if not gregorian.date_is_valid(day, month, year):
			raise core.InvalidDate(day, month, year)
		return Class._construct(day, month, year)

	@classmethod
	def from_days(Class, days):
		"""
		# Create the date that is &days after 1970-01-01.
		"""
		return Class._construct(*gregorian.date_from_days(days))

	@classmethod
	def from_system_date(Class, clock=None):
		"""
		# The current date in UTC according to the &clock.
		"""
		return Class.from_days(system.select(clock).utc_seconds() // system.seconds_in_day)

	@classmethod
	def from_local_date(Class, clock=None):
		"""
		# The current date in the local zone according to the &clock.
		"""
		c = system.select(clock)
		return Class.from_days((c.utc_seconds() + c.utc_offset()) // system.seconds_in_day)

	def set(self, day, month, year):
		"""
		# Replace the fields of the instance; the sentinel's fields are
		# assigned when the new fields are not a valid date.
		"""
		if self is Date.invalid:
			raise TypeError("the invalid date sentinel cannot be modified")
		self.__init__(day, month, year)

	@property
	def valid(self):
		return gregorian.date_is_valid(self.day, self.month, self.year)

	def __iter__(self):
		return iter((self.day, self.month, self.year))

	def __repr__(self):
		return "%s(day=%r, month=%r, year=%r)" % (
			self.__class__.__name__, self.day, self.month, self.year
		)

	def __str__(self):
		return self.as_string()

	def __eq__(self, ob):
		if not isinstance(ob, Date):
			return NotImplemented
		return (self.year, self.month, self.day) == (ob.year, ob.month, ob.day)

	def __lt__(self, ob):
		if not isinstance(ob, Date):
			return NotImplemented
		return (self.year, self.month, self.day) < (ob.year, ob.month, ob.day)

	def _validated(self, day, month, year):
		if gregorian.date_is_valid(day, month, year):
			return self._construct(day, month, year)
		return self._construct(0, 0, 0)

	# Derived values

	def days(self):
		"""
		# The number of days since 1970-01-01; negative before the epoch.
		"""
		return gregorian.days_from_date(self.day, self.month, self.year)

	def weekday(self):
		"""
		# The day of the week from `0`, Sunday, through `6`, Saturday.
		"""
		return week.weekday_from_days(self.days())

	def day_of_year(self):
		return gregorian.day_of_year(self.day, self.month, self.year)

	def iso_week_of_year(self):
		"""
		# The number of the week containing the date counting from the first
		# of January; the first seven days of the year are week one.

		# ! WARNING:
			# Dates near the start and end of a year are numbered differently than
			# ISO-8601 numbers them. Use &iso_calendar for the standard numbering.
		"""
		jan1 = gregorian.days_from_date(1, 1, self.year)
		return week.iso_week_approximation(self.days(), jan1)

	def iso_calendar(self):
		"""
		# The ISO-8601 `(year, week, weekday)` of the date.
		"""
		return week.iso_calendar(self.day, self.month, self.year)

	def week_of_year(self, first_weekday=0):
		"""
		# The week of the year, `0` through `53`, with weeks starting on Sunday
		# when &first_weekday is zero or Monday otherwise.
		"""
		return week.week_of_year(self.day_of_year(), self.weekday(), first_weekday)

	# Arithmetic

	def diff_in_days(self, date):
		"""
		# The number of days from &self to &date; negative when &date is earlier.
		"""
		return date.days() - self.days()

	def add_date(self, date):
		"""
		# Move forward by the day-count of &date.
		"""
		return self._validated(*gregorian.date_from_days(self.days() + date.days()))

	def sub_date(self, date):
		"""
		# Move backward by the day-count of &date.
		"""
		return self._validated(*gregorian.date_from_days(self.days() - date.days()))

	def add_days(self, days):
		return self._validated(*gregorian.date_from_days(self.days() + days))

	def sub_days(self, days):
		return self._validated(*gregorian.date_from_days(self.days() - days))

	def add_years(self, years, *, validate=False):
		"""
		# Change the year leaving the month and day as they are.

		# The result is not checked unless &validate is true, so the 29th of February
		# can be carried into a common year. When checked, &invalid is returned
		# for such dates.
		"""
		fields = (self.day, self.month, self.year + years)
		if validate:
			return self._validated(*fields)
		return self._construct(*fields)

	def sub_years(self, years, *, validate=False):
		return self.add_years(-years, validate=validate)

	def add_months(self, months, *, validate=False):
		"""
		# Change the month, carrying into the year, leaving the day as it is.

		# The day is not limited to the length of the new month; the 31st of January
		# plus one month is the 31st of February unless &validate is true,
		# in which case &invalid is returned.
		"""
		carry, moy = divmod(self.month - 1 + months, gregorian.months_in_year)
		fields = (self.day, moy + 1, self.year + carry)
		if validate:
			return self._validated(*fields)
		return self._construct(*fields)

	def sub_months(self, months, *, validate=False):
		return self.add_months(-months, validate=validate)

	# Formatting

	def as_string(self, _format=format.format_date):
		"""
		# The date in the `YYYY-MM-DD` form.
		"""
		return _format(self)

	def as_formatted_string(self, pattern, _render=format.formatter('date')):
		"""
		# Render the date using a strftime style &pattern.
		# &.format.date_directives lists the available directives.
		"""
		return _render(self, pattern)

Date.invalid = Date._construct(0, 0, 0)

def split_seconds(seconds):
	"""
	# Split a number of seconds into hours, minutes, and seconds.
	# Each field carries the sign of &seconds; hours are not limited to a day.
	"""
	sign = -1 if seconds < 0 else 1
	h, r = divmod(abs(seconds), 3600)
	m, s = divmod(r, 60)
	return (sign * h, sign * m, sign * s)

def time_is_valid(hour, minute, second):
	"""
	# Whether the &minute and &second are within a clock's range.
	# The &hour is not checked.
	"""
	return 0 <= minute < 60 and 0 <= second < 60

@functools.total_ordering
class Time(object):
	"""
	# A clock time or a signed duration in whole seconds.

	# The hour is never limited to a day; arithmetic carries into it and
	# negative results are represented with negative fields.
	"""
	__slots__ = ('hour', 'minute', 'second')

	#: The sentinel representing an invalid time; assigned after the class is defined.
	invalid = None

	def __init__(self, hour=0, minute=0, second=0):
		if not time_is_valid(hour, minute, second):
			hour, minute, second = 0, -1, -1

		self.hour = hour
		self.minute = minute
		self.second = second

	@classmethod
	def _construct(Class, hour, minute, second):
		t = Class.__new__(Class)
		t.hour = hour
		t.minute = minute
		t.second = second
		return t

	@classmethod
	def of(Class, hour, minute, second):
		"""
		# Create a time from the given fields. &invalid is returned when the
		# minute or second is outside the range `0` through `59`.
		"""
		return Class(hour, minute, second)

	@classmethod
	def require(Class, hour, minute, second):
		"""
		# Create a time from the given fields.

		# [ Exceptions ]
		# /&core.InvalidTime/
			# The minute or second is outside the range `0` through `59`.
		"""
		if not time_is_valid(hour, minute, second):
			raise core.InvalidTime(hour, minute, second)
		return Class._construct(hour, minute, second)

	@classmethod
	def from_seconds(Class, seconds):
		return Class._construct(*split_seconds(seconds))

	@classmethod
	def from_system_clock(Class, clock=None):
		"""
		# The current time of day in UTC according to the &clock.
		"""
		return Class.from_seconds(system.select(clock).utc_seconds() % system.seconds_in_day)

	@classmethod
	def from_local_clock(Class, clock=None):
		"""
		# The current local time of day according to the &clock.
		"""
		return Class(*system.select(clock).local_time())

	def set(self, hour, minute, second):
		if self is Time.invalid:
			raise TypeError("the invalid time sentinel cannot be modified")
		self.__init__(hour, minute, second)

	@property
	def valid(self):
		return time_is_valid(self.hour, self.minute, self.second)

	def __iter__(self):
		return iter((self.hour, self.minute, self.second))

	def __repr__(self):
		return "%s(hour=%r, minute=%r, second=%r)" % (
			self.__class__.__name__, self.hour, self.minute, self.second
		)

	def __str__(self):
		return self.as_string()

	def __eq__(self, ob):
		if not isinstance(ob, Time):
			return NotImplemented
		return (self.hour, self.minute, self.second) == (ob.hour, ob.minute, ob.second)

	def __lt__(self, ob):
		if not isinstance(ob, Time):
			return NotImplemented
		return (self.hour, self.minute, self.second) < (ob.hour, ob.minute, ob.second)

	def as_seconds(self):
		return self.hour * 3600 + self.minute * 60 + self.second

	def as_float(self):
		"""
		# The time as hours with the minutes in the first two decimal places and the
		# seconds in the following two, each scaled from sixty to one hundred.
		"""
		m = self.minute / 60 * 100
		s = self.second / 60 * 100
		return self.hour + m / 100 + s / 10000

	# Arithmetic

	def diff_in_seconds(self, time):
		"""
		# The number of seconds from &self to &time; negative when &time is earlier.
		"""
		return time.as_seconds() - self.as_seconds()

	def add_time(self, time):
		return self.from_seconds(self.as_seconds() + time.as_seconds())

	def sub_time(self, time):
		return self.from_seconds(self.as_seconds() - time.as_seconds())

	def add_hours(self, hours):
		return self.from_seconds(self.as_seconds() + hours * 3600)

	def sub_hours(self, hours):
		return self.from_seconds(self.as_seconds() - hours * 3600)

	def add_minutes(self, minutes):
		return self.from_seconds(self.as_seconds() + minutes * 60)

	def sub_minutes(self, minutes):
		return self.from_seconds(self.as_seconds() - minutes * 60)

	def add_seconds(self, seconds):
		return self.from_seconds(self.as_seconds() + seconds)

	def sub_seconds(self, seconds):
		return self.from_seconds(self.as_seconds() - seconds)

	# Formatting

	def as_string(self, _format=format.format_time):
		"""
		# The time in the `HH:MM:SS` form.
		"""
		return _format(self)

	def as_formatted_string(self, pattern, _render=format.formatter('time')):
		"""
		# Render the time using a strftime style &pattern.
		# &.format.time_directives lists the available directives.
		"""
		return _render(self, pattern)

Time.invalid = Time._construct(0, -1, -1)
