import time
from .. import types as module

def test_of(test):
	dt = module.CivilDateTime.of(1982, 5, 17, 3, 4, 5)
	test/82 == dt.year_offset
	test/1982 == dt.year
	test/4 == dt.month
	test/17 == dt.day
	test/(3, 4, 5) == (dt.hour, dt.minute, dt.second)
	test/module.Hint.unknown == dt.dst

def test_defaults(test):
	dt = module.CivilDateTime()
	test/0 == dt.year
	test/(-1900, 0, 1, 0, 0, 0) == dt.fields()

def test_struct(test):
	dt = module.CivilDateTime.of(2024, 2, 29, 12, 30, 15, dst=module.Hint.inactive)
	st = dt.struct()
	test/(2024, 2, 29, 12, 30, 15) == st[:6]
	test/0 == st[8]

def test_from_struct(test):
	dt = module.CivilDateTime.from_struct(time.gmtime(0))
	test/module.CivilDateTime.of(1970, 1, 1, dst=module.Hint.inactive) == dt
	test/module.Hint.active == module.CivilDateTime.from_struct((2000, 7, 1, 0, 0, 0, 0, 0, 1)).dst

def test_copy(test):
	dt = module.CivilDateTime.of(2000, 1, 1)
	c = dt.copy()
	test/c == dt
	test.invert/c % dt
	c.day = 2
	test/1 == dt.day

def test_str(test):
	test/'2024-02-29T01:02:03' == str(module.CivilDateTime.of(2024, 2, 29, 1, 2, 3))
	test/'0987-12-01T00:00:00' == str(module.CivilDateTime.of(987, 12, 1))

def test_ordering_values(test):
	test/-1 == module.Ordering.less
	test/0 == module.Ordering.equal
	test/1 == module.Ordering.greater
