"""
# System clock access.

# Provides the &Platform clock reading the host through the standard library
# and the &Fixed clock reporting configured values. Operations reading the
# current time use the clock returned by &default unless one is given.

# [ Engineering ]
# The default is selected once using the `CIVILTIME_CLOCK` environment variable:

# /`platform`/
	# The host's clock; the default when the variable is absent or empty.
# /`fixed:<utc-seconds>[:<offset-seconds>]`/
	# A &Fixed clock; useful for reproducible output.
"""
import os
import logging
import time as stdtime
import typing

from . import abstract

logger = logging.getLogger(__name__)

#: Environment variable consulted by &default.
environment_variable = 'CIVILTIME_CLOCK'

seconds_in_day = 86400

def _split_day(seconds):
	h, r = divmod(seconds % seconds_in_day, 3600)
	return (h,) + divmod(r, 60)

class Platform(object):
	"""
	# &abstract.Clock implementation reading the host's real clock and
	# the system's default time zone.
	"""
	__slots__ = ('_time', '_localtime')

	def __init__(self, time=stdtime.time, localtime=stdtime.localtime):
		self._time = time
		self._localtime = localtime

	def __repr__(self):
		return 'Platform()'

	def utc_seconds(self) -> int:
		return int(self._time())

	def local_time(self) -> typing.Tuple[int, int, int]:
		lt = self._localtime()
		return (lt.tm_hour, lt.tm_min, lt.tm_sec)

	def daylight_saving(self) -> bool:
		return self._localtime().tm_isdst > 0

	def utc_offset(self) -> int:
		return self._localtime().tm_gmtoff

class Fixed(object):
	"""
	# &abstract.Clock implementation reporting the same point in time on every read.

	# [ Parameters ]
	# /utc/
		# Seconds since the epoch reported by &utc_seconds.
	# /offset/
		# Seconds ahead of UTC reported by &utc_offset and applied to &local_time.
	# /dst/
		# Whether daylight saving time is reported as being in effect.
	"""
	__slots__ = ('utc', 'offset', 'dst')

	def __init__(self, utc=0, offset=0, dst=False):
		self.utc = utc
		self.offset = offset
		self.dst = dst

	def __repr__(self):
		return 'Fixed(utc=%r, offset=%r, dst=%r)' % (self.utc, self.offset, self.dst)

	def utc_seconds(self) -> int:
		return self.utc

	def local_time(self) -> typing.Tuple[int, int, int]:
		return _split_day(self.utc + self.offset)

	def daylight_saving(self) -> bool:
		return self.dst

	def utc_offset(self) -> int:
		return self.offset

def configured(setting:str) -> abstract.Clock:
	"""
	# Construct the clock identified by the &setting string.

	# [ Exceptions ]
	# /&ValueError/
		# The setting does not identify a clock.
	"""
	kind, _, params = (setting or 'platform').strip().partition(':')

	if kind == 'platform' and not params:
		return Platform()
	elif kind == 'fixed':
		try:
			fields = [int(x) for x in params.split(':')] if params else [0]
		except ValueError:
			fields = ()

		if 0 < len(fields) <= 2:
			return Fixed(*fields)

	logger.warning("unrecognized clock setting %r in %s", setting, environment_variable)
	raise ValueError("unrecognized clock setting: " + repr(setting))

_default = None

def default() -> abstract.Clock:
	"""
	# The clock used when none is given to an operation reading the current time.
	"""
	global _default

	if _default is None:
		_default = configured(os.environ.get(environment_variable, ''))
		logger.debug("selected default clock %r", _default)

	return _default

def install(clock:abstract.Clock) -> abstract.Clock:
	"""
	# Replace the default clock and return the one previously installed.
	# Installing &None restores selection by &default.
	"""
	global _default

	previous = _default
	_default = clock
	return previous

def select(clock:abstract.Clock=None) -> abstract.Clock:
	"""
	# Return &clock, or the &default when &None.
	"""
	return default() if clock is None else clock
