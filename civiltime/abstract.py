"""
# Abstract base classes for platform calendar engines.

# Primarily, this module exists to document the interface to &Engine.
"""
from abc import abstractmethod
import typing

class Engine(typing.Protocol):
	"""
	# The platform's calendar primitives.

	# Timestamps are opaque integers. Their unit is not assumed to be the
	# second; &..calibrate measures it.

	# Engines signal failure by raising &OverflowError, &ValueError, or &OSError.
	# Callers in this package translate those into &..core.EnvironmentFault.

	# Many platform calendar primitives share hidden process state. Hosts calling
	# an engine from multiple threads should serialize access to it.
	"""

	@abstractmethod
	def represent(self, civil) -> int:
		"""
		# Convert the civil date-time, &civil, into a timestamp.

		# The conversion honors `civil.dst` and may interpret the fields
		# in the platform's local zone.
		"""

	@abstractmethod
	def decompose(self, timestamp:int):
		"""
		# Convert the &timestamp into a UTC &..types.CivilDateTime.
		"""

	@abstractmethod
	def now(self) -> int:
		"""
		# The current time as a timestamp.
		"""
