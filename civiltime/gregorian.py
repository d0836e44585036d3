"""
# Gregorian calendar functions and data.

# Conversions between civil dates, `(day, month, year)`, and day-counts relative
# to 1970-01-01 follow the era based algorithms published by Howard Hinnant.
# The calendar is proleptic: years before 1 are numbered 0, -1, -2, and so on.
"""

#: number of years in a gregorian cycle, an era.
years_in_era = 400

#: number of days in a gregorian cycle.
days_in_era = 146097

#: days between 0000-03-01, the first day of era zero, and 1970-01-01.
epoch_shift = 719468

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

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

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
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def calendar_of(year, _leap=calendar_leap, _common=calendar_year):
	"""
	# Select the month-to-days table for the given &year.
	"""
	return _leap if year_is_leap(year) else _common

def days_in_month(month, year):
	"""
	# The number of days in the &month, `1` through `12`, of the &year.
	"""
	return calendar_of(year)[month - 1]

def date_is_valid(day, month, year):
	"""
	# Whether the triple identifies a day on the calendar.
	"""
	if month < 1 or month > months_in_year:
		return False
	if day < 1 or day > days_in_month(month, year):
		return False
	return True

def day_of_year(day, month, year, sum=sum):
	"""
	# The one-based ordinal of the date within its year.

	# The &month is not checked; months outside `1` through `12` contribute
	# nothing beyond the given &day.
	"""
	return day + sum(calendar_of(year)[:max(month - 1, 0)])

def days_from_date(day, month, year):
	"""
	# Convert a Gregorian date to the number of days since 1970-01-01.
	# Negative values indicate days prior to the epoch.

	# The year is shifted so that it begins in March, leaving the leap day
	# at the end of the shifted year.
	"""
	if month <= 2:
		year -= 1
		mp = month + 9
	else:
		mp = month - 3

	# Floor division keeps negative years in the preceding era.
	era = year // years_in_era
	yoe = year - era * years_in_era
	doy = (153 * mp + 2) // 5 + day - 1
	doe = yoe * 365 + yoe // 4 - yoe // 100 + doy

	return era * days_in_era + doe - epoch_shift

def date_from_days(days):
	"""
	# Convert the given number of days since 1970-01-01 into a Gregorian date
	# in the form: `(day, month, year)`.
	"""
	z = days + epoch_shift
	era = z // days_in_era
	doe = z - era * days_in_era
	yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
	doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
	mp = (5 * doy + 2) // 153

	day = doy - (153 * mp + 2) // 5 + 1
	month = mp + 3 if mp < 10 else mp - 9
	year = yoe + era * years_in_era

	# January and February belong to the following civil year.
	if month <= 2:
		year += 1

	return (day, month, year)
