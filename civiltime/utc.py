"""
# UTC timestamp reconciliation.

# Platform engines commonly offer forward conversion only for local time. &to_utc_timestamp
# uses that conversion as an approximation of the UTC timestamp, then corrects it by
# comparing the engine's UTC decomposition with the requested record.

# The approximation must be within a day of the requested time, as the
# differences are measured with &order.intraday_diff.

# [ Engine Failures ]

# When the engine cannot represent or decompose a value, &core.EnvironmentFault
# is raised. When correction fails to produce an agreeing timestamp,
# &core.DiscrepancyFault is raised. Hosts that consider either condition fatal can
# escalate with &core.panic.
"""
from . import core
from . import order
from . import system
from . import calibrate

def decompose(engine, timestamp):
	"""
	# Decompose &timestamp using &engine, translating failures into &core.EnvironmentFault.
	"""
	try:
		return engine.decompose(timestamp)
	except (OverflowError, ValueError, OSError) as err:
		raise core.EnvironmentFault('decompose', "couldn't get UTC time for " + str(timestamp)) from err

def offset(timestamp, expected, engine=None) -> int:
	"""
	# The seconds from the &expected record to the decomposition of &timestamp.

	# Only meaningful when &timestamp is within a day of &expected.
	# A leap second or other calendar anomaly between the two can make the
	# result inaccurate; &check_timestamp verifies a correction.
	"""
	engine = system.select(engine)
	return order.intraday_diff(expected, decompose(engine, timestamp))

def check_timestamp(timestamp, expected, engine=None):
	"""
	# Verify that &timestamp decomposes into the calendar fields of &expected.

	# [ Returns ]
	# A pair: whether they agree, and the seconds from &expected to the decomposed
	# record; zero when they agree.
	"""
	engine = system.select(engine)
	observed = decompose(engine, timestamp)

	if order.compare(expected, observed) == order.Ordering.equal:
		return (True, 0)
	return (False, order.intraday_diff(expected, observed))

def to_utc_timestamp(civil, engine=None) -> int:
	"""
	# Get the engine timestamp of the UTC date-time &civil.

	# [ Parameters ]
	# /civil/
		# The requested UTC date-time. Not modified.
	# /engine/
		# The &abstract.Engine to use. Defaults to &system.engine.

	# [ Exceptions ]
	# /&core.EnvironmentFault/
		# The engine could not represent or decompose a value.
	# /&core.DiscrepancyFault/
		# No timestamp within a second of the correction agreed with &civil.
	"""
	engine = system.select(engine)
	requested = civil.copy()

	# Within a day of the requested time; off by the local zone's offset.
	ts = calibrate.represent(engine, requested)

	secs_diff = offset(ts, requested, engine)
	if not secs_diff:
		return ts

	one_second = calibrate.unit_size_for('second', engine)
	ts -= one_second * secs_diff

	secs_diff = offset(ts, requested, engine)
	if not secs_diff:
		return ts

	# An inserted or removed second between the approximation and the
	# request; check either side before giving up.
	for probe in (ts + one_second, ts - one_second):
		if not offset(probe, requested, engine):
			return probe

	raise core.DiscrepancyFault(
		'reconcile', "couldn't get calendar time for " + str(requested),
		ts, secs_diff,
	)
