identity = 'http://fault.io/project/python/civiltime'
name = 'civiltime'
abstract = 'Proleptic Gregorian date and wall clock time arithmetic with strftime style formatting.'
icon = '📅'
study = 'calendar'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
