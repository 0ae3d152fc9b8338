from .. import core as module

def test_constants(test):
	test/86400 == module.seconds_in_day
	test/3600 == module.seconds_in_hour
	test/-1900 == module.unset_year
	test/(30, 0, 2, 12, 0, 0) == module.calibration_reference

def test_fault_string(test):
	f = module.EnvironmentFault('represent', "couldn't get calendar time")
	test/"civiltime:represent: couldn't get calendar time" == str(f)
	test/'represent' == f.operation
	test.isinstance(f, module.Fault)
	test.isinstance(f, Exception)

def test_discrepancy_fields(test):
	f = module.DiscrepancyFault('reconcile', "couldn't get calendar time", 1000, -1)
	test/1000 == f.timestamp
	test/-1 == f.difference
	test/str(f) << 'civiltime:reconcile:'

def test_panic(test):
	f = module.EnvironmentFault('decompose', "couldn't get UTC time")
	crit = test/module.Critical ^ (lambda: module.panic(f))
	test/crit.__cause__ % f
	test/str(f) == str(crit)
	test/True == crit.__kill__
	# Not trapped by ordinary handlers.
	test.invert.isinstance(crit, Exception)
