from .. import order as module
from ..types import CivilDateTime, Ordering, Hint

def test_compare_fields(test):
	base = CivilDateTime.of(2024, 6, 15, 12, 30, 30)
	test/Ordering.equal == module.compare(base, base.copy())

	# Each field, in priority order.
	for field in ('year_offset', 'month', 'day', 'hour', 'minute', 'second'):
		later = base.copy()
		setattr(later, field, getattr(later, field) + 1)
		test/Ordering.less == module.compare(base, later)
		test/Ordering.greater == module.compare(later, base)

def test_compare_priority(test):
	a = CivilDateTime.of(2023, 12, 31, 23, 59, 59)
	b = CivilDateTime.of(2024, 1, 1, 0, 0, 0)
	test/Ordering.less == module.compare(a, b)

	a = CivilDateTime.of(2024, 1, 2, 0, 0, 0)
	b = CivilDateTime.of(2024, 1, 1, 23, 59, 59)
	test/Ordering.greater == module.compare(a, b)

def test_compare_ignores_dst(test):
	a = CivilDateTime.of(2024, 7, 1, dst=Hint.active)
	b = CivilDateTime.of(2024, 7, 1, dst=Hint.inactive)
	test/Ordering.equal == module.compare(a, b)

def test_intraday_diff_same_day(test):
	a = CivilDateTime.of(2024, 3, 10, 10, 0, 0)
	b = CivilDateTime.of(2024, 3, 10, 14, 30, 5)
	test/((4 * 3600) + (30 * 60) + 5) == module.intraday_diff(a, b)
	test/-((4 * 3600) + (30 * 60) + 5) == module.intraday_diff(b, a)

def test_intraday_diff_wrap(test):
	a = CivilDateTime.of(2024, 3, 10, 23, 0, 0)
	b = CivilDateTime.of(2024, 3, 11, 1, 0, 0)
	test/7200 == module.intraday_diff(a, b)
	test/-7200 == module.intraday_diff(b, a)

def test_intraday_diff_year_boundary(test):
	a = CivilDateTime.of(2023, 12, 31, 23, 59, 59)
	b = CivilDateTime.of(2024, 1, 1, 0, 0, 0)
	test/1 == module.intraday_diff(a, b)
	test/-1 == module.intraday_diff(b, a)

def test_intraday_diff_equal(test):
	a = CivilDateTime.of(2024, 3, 10, 5, 6, 7)
	test/0 == module.intraday_diff(a, a.copy())

def test_intraday_diff_distant(test):
	# Further apart than a day; deterministic, but not the elapsed time.
	a = CivilDateTime.of(2024, 3, 10, 10, 0, 0)
	b = CivilDateTime.of(2024, 3, 11, 14, 0, 0)
	test/(4 * 3600) == module.intraday_diff(a, b)

	b = CivilDateTime.of(2025, 3, 10, 10, 0, 0)
	test/0 == module.intraday_diff(a, b)
