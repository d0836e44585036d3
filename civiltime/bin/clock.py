"""
# Print the local date and time.

# Positional arguments select the date and time patterns; by default,
# `%F` and `%T` are used.

#!shell
	python -m civiltime.bin.clock '%A, %e %B %Y' '%r'
"""
import sys
from .. import library

def main(inv=None, clock=None):
	if inv is None:
		inv = sys.argv[1:]
	date_format, time_format = (list(inv) + ['%F', '%T'][len(inv):])[:2]

	date = library.local_date(clock)
	time = library.local_time(clock)
	sys.stdout.write(' '.join((
		date.as_formatted_string(date_format),
		time.as_formatted_string(time_format),
	)) + '\n')
	return 0

if __name__ == '__main__':
	sys.exit(main())
