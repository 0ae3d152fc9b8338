import pytest
from . import harness

class Test(harness.Test):
	__slots__ = ()
	Skipped = pytest.skip.Exception

@pytest.fixture
def test(request):
	t = Test(request.node.name, request.function)
	with t.exits:
		yield t
