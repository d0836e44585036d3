"""
# Clock selection and the clock implementations.
"""
import types
import pytest

from .. import abstract
from .. import system as module

@pytest.fixture
def selection(monkeypatch):
	# Forget any clock selected by an earlier test.
	monkeypatch.setattr(module, '_default', None)
	monkeypatch.delenv(module.environment_variable, raising=False)
	return monkeypatch

def test_Fixed():
	c = module.Fixed(utc=1719057600, offset=7200, dst=True)
	assert c.utc_seconds() == 1719057600
	assert c.local_time() == (14, 0, 0)
	assert c.daylight_saving() == True
	assert c.utc_offset() == 7200
	assert repr(c) == "Fixed(utc=1719057600, offset=7200, dst=True)"

def test_Fixed_local_wrap():
	assert module.Fixed(utc=0, offset=-3600).local_time() == (23, 0, 0)
	assert module.Fixed(utc=86399, offset=1).local_time() == (0, 0, 0)
	assert module.Fixed().daylight_saving() == False

def test_Platform_sources():
	lt = types.SimpleNamespace(tm_hour=14, tm_min=5, tm_sec=9, tm_isdst=1, tm_gmtoff=7200)
	c = module.Platform(time=lambda: 1719057600.75, localtime=lambda: lt)
	assert c.utc_seconds() == 1719057600
	assert c.local_time() == (14, 5, 9)
	assert c.daylight_saving() == True
	assert c.utc_offset() == 7200

	lt.tm_isdst = -1
	assert c.daylight_saving() == False

def test_Platform_host():
	c = module.Platform()
	assert isinstance(c.utc_seconds(), int)
	assert c.utc_seconds() > 1700000000

	h, m, s = c.local_time()
	assert 0 <= h < 24
	assert 0 <= m < 60
	assert 0 <= s < 62
	assert isinstance(c.daylight_saving(), bool)
	assert isinstance(c.utc_offset(), int)

def test_protocol_conformance():
	for Class in (module.Platform, module.Fixed):
		for name in ('utc_seconds', 'local_time', 'daylight_saving', 'utc_offset'):
			assert callable(getattr(Class, name)), name
			assert hasattr(abstract.Clock, name)

def test_configured():
	assert isinstance(module.configured(''), module.Platform)
	assert isinstance(module.configured('platform'), module.Platform)

	c = module.configured('fixed')
	assert (c.utc, c.offset) == (0, 0)
	c = module.configured('fixed:100')
	assert (c.utc, c.offset) == (100, 0)
	c = module.configured(' fixed:100:-3600 ')
	assert (c.utc, c.offset) == (100, -3600)

def test_configured_errors():
	for setting in ('bogus', 'fixed:a', 'fixed:1:2:3', 'platform:1'):
		with pytest.raises(ValueError):
			module.configured(setting)

def test_default_environment(selection):
	selection.setenv(module.environment_variable, 'fixed:86400')
	c = module.default()
	assert isinstance(c, module.Fixed)
	assert c.utc == 86400
	# Selected once.
	assert module.default() is c

def test_default_platform(selection):
	assert isinstance(module.default(), module.Platform)

def test_install(selection):
	fixed = module.Fixed(utc=5)
	assert module.install(fixed) is None
	assert module.default() is fixed
	assert module.select() is fixed

	other = module.Fixed(utc=6)
	assert module.select(other) is other
	assert module.install(None) is fixed
