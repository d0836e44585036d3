"""
# Format dates and times using strftime style patterns.

# The pattern is scanned for `%` directives; each directive consumes exactly one
# following character and is replaced with the rendering selected from the
# directive table of the subject's type. Characters that are not recognized as
# directives are emitted without the `%`, and a trailing `%` is dropped.

# Names are always English; no locale is consulted.

# [ Elements ]
# /date_directives/
	# Directive character to rendering function for &.types.Date instances.
# /time_directives/
	# Directive character to rendering function for &.types.Time instances.
"""
from . import gregorian
from . import week

iso8601_date = "{:04}-{:02}-{:02}"
iso8601_time = "{:02}:{:02}:{:02}"

models = {
	'date': iso8601_date,
	'time': iso8601_time,
}

def interpret(pattern, directives, subject, *, iter=iter, next=next):
	"""
	# Render the &subject according to the &pattern using the renderers
	# defined in &directives.
	"""
	out = []
	add = out.append

	chars = iter(pattern)
	for c in chars:
		if c != '%':
			add(c)
			continue

		d = next(chars, None)
		if d is None:
			# Trailing percent.
			break

		render = directives.get(d)
		if render is None:
			add(d)
		else:
			add(render(subject))

	return ''.join(out)

def month_name(month, names=gregorian.month_names):
	if 0 < month <= len(names):
		return names[month - 1].capitalize()
	return ''

def month_abbreviation(month, names=gregorian.month_abbreviations):
	return month_name(month, names)

def century(year):
	# Truncated toward zero like the year itself.
	return -(-year // 100) if year < 0 else year // 100

def year_of_century(year):
	return abs(year) % 100

def twelve_hour(hour):
	if hour == 0:
		return 12
	elif hour > 12:
		return hour - 12
	return hour

def format_date(date, _fmt=models['date'].format):
	return _fmt(date.year, date.month, date.day)

def format_time(time, _fmt=models['time'].format):
	return _fmt(time.hour, time.minute, time.second)

def format_us_date(date):
	return "{:02}/{:02}/{:02}".format(date.month, date.day, year_of_century(date.year))

def format_twelve_hour(time):
	meridiem = 'PM' if time.hour >= 12 else 'AM'
	return "{:2}:{:02}:{:02} {}".format(twelve_hour(time.hour), time.minute, time.second, meridiem)

common_directives = {
	'%': (lambda x: '%'),
	'n': (lambda x: '\n'),
	't': (lambda x: '\t'),
}

date_directives = dict(common_directives)
date_directives.update({
	# Year
	'Y': (lambda d: "{:04}".format(d.year)),
	'y': (lambda d: "{:02}".format(year_of_century(d.year))),
	'C': (lambda d: "{:02}".format(century(d.year))),
	'G': (lambda d: "{:04}".format(d.year)),
	'g': (lambda d: "{:02}".format(year_of_century(d.year))),

	# Month
	'b': (lambda d: month_abbreviation(d.month)),
	'B': (lambda d: month_name(d.month)),
	'm': (lambda d: "{:02}".format(d.month)),

	# Week
	'U': (lambda d: "{:02}".format(d.week_of_year(0))),
	'V': (lambda d: "{:02}".format(d.iso_week_of_year())),
	'W': (lambda d: "{:02}".format(d.week_of_year(1))),

	# Day
	'j': (lambda d: "{:03}".format(d.day_of_year())),
	'd': (lambda d: "{:02}".format(d.day)),
	'e': (lambda d: "{:2}".format(d.day)),

	# Weekday
	'a': (lambda d: week.weekday_abbreviations[d.weekday()].capitalize()),
	'A': (lambda d: week.weekday_names[d.weekday()].capitalize()),
	'w': (lambda d: str(d.weekday())),
	'u': (lambda d: str(d.weekday() or week.days_in_week)),

	# Composites
	'D': format_us_date,
	'F': format_date,
})

time_directives = dict(common_directives)
time_directives.update({
	'H': (lambda t: "{:02}".format(t.hour)),
	'I': (lambda t: "{:02}".format(twelve_hour(t.hour))),
	'M': (lambda t: "{:02}".format(t.minute)),
	'S': (lambda t: "{:02}".format(t.second)),
	'p': (lambda t: 'p.m.' if t.hour >= 12 else 'a.m.'),

	'r': format_twelve_hour,
	'R': (lambda t: "{:02}:{:02}".format(t.hour, t.minute)),
	'T': format_time,
})

def formatter(kind, _tables={'date': date_directives, 'time': time_directives}):
	"""
	# Given a subject kind, `'date'` or `'time'`, return a function rendering
	# a pattern for an instance of that kind.
	"""
	directives = _tables[kind]
	def render(subject, pattern, interpret=interpret, directives=directives):
		return interpret(pattern, directives, subject)
	return render
