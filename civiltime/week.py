"""
# Week based measures of time: days of seven.
"""
from . import gregorian

#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'sun', 'mon', 'tue', 'wed', 'thu', 'fri', 'sat',
)

#: Offset of the epoch's weekday; 1970-01-01 is a Thursday.
epoch_offset = -4

def day_of_week(offset, days):
	"""
	# Derive the canonical day of week from the given offset and days.
	"""
	return ((days % 7) - offset) % 7

def weekday_from_days(days, offset=epoch_offset):
	"""
	# The day of the week, `0` being Sunday, of the given day-count.
	"""
	return day_of_week(offset, days)

def week_of_year(yday, wday, first_weekday=0):
	"""
	# The week number, `0` through `53`, of the one-based day of year, &yday,
	# with the weekday, &wday.

	# ! NOTE:
		# The day of year is one-based, so the week turns over a day earlier
		# than the zero-based `%U` and `%W` of C's strftime.

	# [ Parameters ]
	# /first_weekday/
		# Zero when weeks start on Sunday. Any other value starts weeks on Monday.
	"""
	if first_weekday:
		wday = (wday - 1) % days_in_week
	return (yday + days_in_week - wday) // days_in_week

def iso_week_approximation(days, jan1):
	"""
	# Count the complete weeks since the first of January, &jan1, of the year
	# containing &days, starting from one.

	# ! WARNING:
		# This is not ISO-8601 week numbering. The first week always starts on
		# the first day of the year. &iso_calendar provides the standard numbering.
	"""
	return (days - jan1) // days_in_week + 1

def iso_calendar(day, month, year):
	"""
	# The ISO-8601 week date of the given Gregorian date: `(year, week, weekday)`.
	# Weekdays range from `1`, Monday, to `7`, Sunday.
	"""
	days = gregorian.days_from_date(day, month, year)
	# Monday based weekday, 0 through 6.
	wd = (weekday_from_days(days) - 1) % days_in_week

	# The week containing the Thursday decides the year.
	thursday = days - wd + 3
	iso_year = gregorian.date_from_days(thursday)[2]
	first = gregorian.days_from_date(1, 1, iso_year)

	return (iso_year, (thursday - first) // days_in_week + 1, wd + 1)
