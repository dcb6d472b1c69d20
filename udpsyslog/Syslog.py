import logging
import socket
import threading

from udpsyslog.Codec import (
	SEVERITY, FACILITY, severity_to_number, facility_to_number,
	encode_priority, build_packet,
	emergency, alert, critical, error, warning, notice, info, debug,
	kern, user, mail, daemon, auth, syslog, lpr, news, uucp, authpriv, ftp,
	cron, local0, local1, local2, local3, local4, local5, local6, local7,
)
from udpsyslog.Config import Config
from udpsyslog.Sender import Sender

VERSION = '1.7'

_logger = logging.getLogger('udpsyslog')
_lock = threading.Lock()
_sender = None

def version():
	return VERSION

def whereis():
	return _sender

def local_host(config):
	host = config.get('host', None)
	return host if host not in (None, '') else socket.gethostname()

def start(host=None, port=None, config=None):
	"""Start the process-wide sender, or return the one already running.

	Accepts start(), start(port), start(host), start((host, port)) and
	start(host, port). Missing values come from Config, then the local
	hostname and port 514.
	"""
	global _sender

	if isinstance(host, tuple):
		host, port = host
	elif isinstance(host, int) and port == None:
		host, port = None, host

	with _lock:
		if _sender != None and _sender.is_running():
			return _sender

		if host == None or port == None:
			config = config if config != None else Config().load()
			host = local_host(config) if host == None else host
			port = config.get('port', 514) if port == None else port

		_sender = Sender(host, port, _logger).start()
		return _sender

def stop(timeout=None):
	global _sender

	with _lock:
		if _sender == None:
			_logger.debug('stop() without a running sender')
			return False
		if not _sender.is_running():
			# stopped through its own handle, or a late stop finished
			_sender = None
			return True
		if not _sender.stop(timeout):
			_logger.debug('Sender did not acknowledge stop within %s seconds' % (timeout))
			return False
		_sender = None
		return True

def send(*request):
	if len(request) not in (3, 4):
		raise TypeError('send() takes (tag, severity, message) or (facility, tag, severity, message), got %d arguments' % (len(request)))
	sender = _sender
	if sender == None or not sender.is_running():
		_logger.debug('No sender running, message dropped')
		return
	sender.send(*request)
