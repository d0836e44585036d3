"""
# Abstract base classes for the clock sources read by &.types.

# Primarily, this module exists to document the &Clock interface.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

class Clock(typing.Protocol):
	"""
	# Source of the current wall clock time and the local zone's offset.

	# &.system.Platform reads the host; &.system.Fixed reports fixed values
	# for tests and reproducible output.
	"""

	@abstractmethod
	def utc_seconds(self) -> int:
		"""
		# The number of whole seconds elapsed since 1970-01-01T00:00:00Z.
		"""

	@abstractmethod
	def local_time(self) -> typing.Tuple[int, int, int]:
		"""
		# The local wall clock time as an `(hour, minute, second)` tuple.
		"""

	@abstractmethod
	def daylight_saving(self) -> bool:
		"""
		# Whether daylight saving time is in effect for the local zone.
		"""

	@abstractmethod
	def utc_offset(self) -> int:
		"""
		# The signed number of seconds the local zone is ahead of UTC,
		# including any daylight saving adjustment.
		"""
