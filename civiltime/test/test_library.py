import pytest

from .. import library as module
from .. import system
from ..bin import clock as clockbin

solstice = module.Fixed(utc=1719057600, offset=13 * 3600, dst=True)

@pytest.fixture
def installed(monkeypatch):
	monkeypatch.setattr(system, '_default', None)
	module.install(solstice)
	return solstice

def test_current(installed):
	assert module.today() == module.Date.of(22, 6, 2024)
	assert module.now() == module.Time.of(12, 0, 0)
	assert module.local_date() == module.Date.of(23, 6, 2024)
	assert module.local_time() == module.Time.of(1, 0, 0)
	assert module.daylight_saving() == True
	assert module.utc_offset() == 13 * 3600

def test_explicit_clock(installed):
	epoch = module.Fixed()
	assert module.today(epoch) == module.Date.of(1, 1, 1970)
	assert module.now(epoch) == module.Time()
	assert module.daylight_saving(epoch) == False

def test_exports():
	assert issubclass(module.InvalidDate, module.Error)
	assert issubclass(module.InvalidTime, module.Error)
	assert module.split_seconds(-90) == (0, -1, -30)

def test_range():
	dates = list(module.range(module.Date.of(28, 2, 2024), module.Date.of(2, 3, 2024)))
	assert dates == [
		module.Date.of(28, 2, 2024),
		module.Date.of(29, 2, 2024),
		module.Date.of(1, 3, 2024),
	]

	begin = module.Date.of(1, 6, 2024)
	june = list(module.range(begin, begin.add_months(1)))
	assert len(june) == 30
	assert june[-1] == module.Date.of(30, 6, 2024)

def test_range_step():
	start = module.Date.of(1, 1, 1970)
	dates = list(module.range(start, start.sub_days(7), -3))
	assert dates == [start, module.Date.of(29, 12, 1969), module.Date.of(26, 12, 1969)]
	assert list(module.range(start, start)) == []

	with pytest.raises(ValueError):
		module.range(start, start, 0)

def test_business_week():
	expected = [module.Date.of(d, 6, 2024) for d in range(17, 22)]
	# Sunday, Monday, Friday, and Saturday of the same week.
	for day in (16, 17, 21, 22):
		assert module.business_week(module.Date.of(day, 6, 2024)) == expected
	assert [d.weekday() for d in expected] == [1, 2, 3, 4, 5]

	# A Sunday belongs to the week that follows it.
	sunday = module.Date.of(23, 6, 2024)
	following = [module.Date.of(d, 6, 2024) for d in range(24, 29)]
	assert sunday.week_of_year(0) == module.Date.of(24, 6, 2024).week_of_year(0)
	assert module.business_week(sunday) == following

def test_clock_command(capsys):
	assert clockbin.main([], clock=solstice) == 0
	assert capsys.readouterr().out == "2024-06-23 01:00:00\n"

	clockbin.main(['%d.%m.%Y'], clock=solstice)
	assert capsys.readouterr().out == "23.06.2024 01:00:00\n"

	clockbin.main(['%A', '%r', 'ignored'], clock=solstice)
	assert capsys.readouterr().out == "Sunday  1:00:00 AM\n"

def test_clock_command_arguments(monkeypatch, capsys):
	# Arguments are read when the command runs.
	monkeypatch.setattr(clockbin.sys, 'argv', ['clock', '%Y', '%H'])
	assert clockbin.main(clock=solstice) == 0
	assert capsys.readouterr().out == "2024 01\n"
