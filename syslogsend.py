import sys, getopt
import logging

from udpsyslog import Syslog
from udpsyslog.Config import Config
from udpsyslog.Errors import SyslogError

def setup_logger(name, level="INFO"):
	numeric_level = getattr(logging, level.upper(), logging.INFO)

	logger = logging.getLogger(name)
	logger.setLevel(numeric_level)

	if logger.handlers:
		return logger

	handler = logging.StreamHandler()
	handler.setLevel(numeric_level)
	handler.setFormatter(logging.Formatter(
		fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	))
	logger.addHandler(handler)
	return logger

def syslogsend_usage():
	print('Usage: %s [-l|--syslog HOST] [-p|--port PORT] [-t|--tag TAG] [-f|--facility FACILITY] [-s|--severity SEVERITY] [-c|--config FILE] [-v] MESSAGE...' % (sys.argv[0]))
	print('\nParameters:')
	print('  -h|--help                  Show this help')
	print('  -l|--syslog    [hostname]  Syslog server to send the message to')
	print('  -p|--port      [514]       Port where the syslog-server listens on')
	print('  -t|--tag       [syslogsend] Program name put in front of the message')
	print('  -f|--facility  [user]      Facility name or number (e.g. local1 or 17)')
	print('  -s|--severity  [notice]    One of: %s' % (', '.join(Syslog.SEVERITY)))
	print('  -c|--config    [syslog.ini] Configuration file with host, port, tag and facility')
	print('  -v|--verbose               Print debug output of the sender')


def main(argv=None):
	argv = sys.argv[1:] if argv == None else argv
	try:
		opts, args = getopt.getopt(argv, 'hl:p:t:f:s:c:v', ['help', 'syslog=', 'port=', 'tag=', 'facility=', 'severity=', 'config=', 'verbose'])
	except getopt.GetoptError:
		syslogsend_usage()
		return 1

	config_file = 'syslog.ini'
	for opt, arg in opts:
		if opt in ('-c', '--config'):
			config_file = arg
	config = Config(config_file).load()

	severity = 'notice'
	for opt, arg in opts:
		if opt in ('-h', '--help'):
			syslogsend_usage()
			return 0
		elif opt in ('-s', '--severity'):
			severity = arg
		elif opt in ('-v', '--verbose'):
			setup_logger('udpsyslog', 'DEBUG')
		elif opt not in ('-c', '--config'):
			config.set(opt, arg)

	if len(args) == 0:
		syslogsend_usage()
		return 1

	try:
		level = Syslog.severity_to_number(severity)
		facility = config.get('facility', 'user')
		facility = Syslog.facility_to_number(facility) if isinstance(facility, str) else facility
		Syslog.start(config.get('host', None), config.get('port', 514), config=config)
	except SyslogError as e:
		print(e, file=sys.stderr)
		syslogsend_usage()
		return 1

	Syslog.send(facility, config.get('tag', 'syslogsend'), level, ' '.join(args))
	Syslog.stop()
	return 0


if __name__ == '__main__':
	sys.exit(main())
