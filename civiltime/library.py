"""
# Primary public module.

# Provides access to the value types, &Date and &Time, and to the current
# date and time according to the default clock of &.system.
"""
import builtins

from . import system

__shortname__ = 'libtime'

from .core import Error, InvalidDate, InvalidTime
from .types import Date, Time, split_seconds
from .system import Platform, Fixed, install

def today(clock=None) -> Date:
	"""
	# The current UTC date.
	"""
	return Date.from_system_date(clock)

def now(clock=None) -> Time:
	"""
	# The current UTC time of day.
	"""
	return Time.from_system_clock(clock)

def local_date(clock=None) -> Date:
	return Date.from_local_date(clock)

def local_time(clock=None) -> Time:
	return Time.from_local_clock(clock)

def daylight_saving(clock=None) -> bool:
	return system.select(clock).daylight_saving()

def utc_offset(clock=None) -> int:
	"""
	# The number of seconds that the local zone is ahead of UTC.
	"""
	return system.select(clock).utc_offset()

def range(start:Date, stop:Date, step:int=1):
	"""
	# Construct an iterator producing the dates from &start up to, but not
	# including, &stop with &step days between each.

	#!/pl/python
		begin = libtime.Date.of(1, 6, 2024)
		june = list(libtime.range(begin, begin.add_months(1)))
	"""
	return map(Date.from_days, builtins.range(start.days(), stop.days(), step))

def business_week(date:Date, list=list):
	"""
	# Return the Monday through Friday dates of the week containing &date.
	# Weeks start on Sunday, so a Sunday selects the following Monday.
	"""
	monday = date.sub_days(date.weekday()).add_days(1)
	return list(range(monday, monday.add_days(5)))
