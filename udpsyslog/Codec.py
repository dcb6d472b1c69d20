from types import MappingProxyType

from udpsyslog.Errors import UnknownSeverity, UnknownFacility

__all__ = [
	'SEVERITY', 'FACILITY', 'severity_to_number', 'facility_to_number',
	'encode_priority', 'build_packet',
	'emergency', 'alert', 'critical', 'error', 'warning', 'notice', 'info', 'debug',
	'kern', 'user', 'mail', 'daemon', 'auth', 'syslog', 'lpr', 'news', 'uucp',
	'authpriv', 'ftp', 'cron', 'local0', 'local1', 'local2', 'local3', 'local4',
	'local5', 'local6', 'local7',
]

SEVERITY = MappingProxyType({
	'emergency': 0,
	'alert': 1,
	'critical': 2,
	'error': 3,
	'warning': 4,
	'notice': 5,
	'info': 6,
	'debug': 7,
})

# 9 (old clock daemon) and 12-14 are reserved; cron is always 15
FACILITY = MappingProxyType({
	'kern': 0,
	'user': 1,
	'mail': 2,
	'daemon': 3,
	'auth': 4,
	'syslog': 5,
	'lpr': 6,
	'news': 7,
	'uucp': 8,
	'authpriv': 10,
	'ftp': 11,
	'cron': 15,
	'local0': 16,
	'local1': 17,
	'local2': 18,
	'local3': 19,
	'local4': 20,
	'local5': 21,
	'local6': 22,
	'local7': 23,
})


def severity_to_number(name):
	try:
		return SEVERITY[name]
	except (KeyError, TypeError):
		raise UnknownSeverity(name) from None


def facility_to_number(name):
	try:
		return FACILITY[name]
	except (KeyError, TypeError):
		raise UnknownFacility(name) from None


def emergency(): return SEVERITY['emergency'] # system is unusable
def alert(): return SEVERITY['alert'] # action must be taken immediately
def critical(): return SEVERITY['critical']
def error(): return SEVERITY['error']
def warning(): return SEVERITY['warning']
def notice(): return SEVERITY['notice'] # normal but significant condition
def info(): return SEVERITY['info']
def debug(): return SEVERITY['debug']


def kern(): return FACILITY['kern']
def user(): return FACILITY['user']
def mail(): return FACILITY['mail']
def daemon(): return FACILITY['daemon']
def auth(): return FACILITY['auth']
def syslog(): return FACILITY['syslog'] # messages generated internally by syslogd
def lpr(): return FACILITY['lpr']
def news(): return FACILITY['news']
def uucp(): return FACILITY['uucp']
def authpriv(): return FACILITY['authpriv']
def ftp(): return FACILITY['ftp']
def cron(): return FACILITY['cron']
def local0(): return FACILITY['local0']
def local1(): return FACILITY['local1']
def local2(): return FACILITY['local2']
def local3(): return FACILITY['local3']
def local4(): return FACILITY['local4']
def local5(): return FACILITY['local5']
def local6(): return FACILITY['local6']
def local7(): return FACILITY['local7']


def encode_priority(facility, severity):
	"""Pack facility and severity into the <PRI> value.

	Both arguments may be table names or plain integers; integers are not
	range checked, so custom local facilities can be given directly.
	"""
	if isinstance(facility, str):
		facility = facility_to_number(facility)
	if isinstance(severity, str):
		severity = severity_to_number(severity)
	return (facility << 3) | severity


def build_packet(priority, tag, body):
	if isinstance(body, (bytes, bytearray, memoryview)):
		tag = tag if isinstance(tag, bytes) else str(tag).encode('utf-8')
		return b'<%d>%s: %s\n' % (priority, tag, bytes(body))
	if isinstance(tag, bytes):
		tag = tag.decode('utf-8')
	return ('<%d>%s: %s\n' % (priority, tag, body)).encode('utf-8')
