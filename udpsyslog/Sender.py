import queue
import socket
import threading

from udpsyslog.Codec import build_packet, encode_priority, severity_to_number
from udpsyslog.Errors import HostResolutionError, SocketOpenError

class Sender:
	"""Owns one UDP socket and pushes every packet through a single worker.

	Requests are queued with send() and written in arrival order. The
	socket is created in the constructor but only ever touched by the
	worker thread after start().
	"""

	def __init__(self, host, port=514, logger=None):
		self.logger = logger
		self.port = int(port)
		self.host = self.resolve(host)
		self.dropped = 0
		self.inbox = queue.Queue()
		self._stopped = threading.Event()
		self._sock = self.open_socket()
		self._thread = threading.Thread(target=self.run, name='udpsyslog-sender', daemon=True)

	@staticmethod
	def resolve(host):
		if not isinstance(host, str):
			return host
		try:
			info = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_DGRAM)
		except (socket.gaierror, UnicodeError) as e:
			raise HostResolutionError(host, e) from e
		if len(info) == 0:
			raise HostResolutionError(host, 'no IPv4 address')
		return info[0][4][0]

	def open_socket(self):
		try:
			sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
		except OSError as e:
			raise SocketOpenError('Cannot create UDP socket: %s' % (e)) from e
		try:
			sock.bind(('', 0))
			sock.setblocking(False)
		except OSError as e:
			sock.close()
			raise SocketOpenError('Cannot bind UDP socket: %s' % (e)) from e
		return sock

	@property
	def address(self):
		return self._sock.getsockname()

	def start(self):
		self._thread.start()
		if self.logger != None:
			self.logger.debug('Sender started for %s:%s' % (self.host, self.port))
		return self

	def is_alive(self):
		return self._thread.is_alive()

	def is_stopped(self):
		return self._stopped.is_set()

	def is_running(self):
		return self.is_alive() and not self.is_stopped()

	def send(self, *request):
		if len(request) not in (3, 4):
			raise TypeError('send() takes (tag, severity, message) or (facility, tag, severity, message), got %d arguments' % (len(request)))
		if self.is_stopped():
			if self.logger != None:
				self.logger.debug('Sender for %s:%s is stopped, message dropped' % (self.host, self.port))
			return
		self.inbox.put(('send', request))

	def stop(self, timeout=None):
		if self.is_stopped():
			return True
		self.inbox.put(('stop', threading.Event()))
		# every caller waits on the same flag, so repeated stops all return
		return self._stopped.wait(timeout)

	def run(self):
		while True:
			item = self.inbox.get()
			if not isinstance(item, tuple) or len(item) != 2:
				continue
			kind, payload = item
			if kind == 'send':
				self.write(payload)
			elif kind == 'stop' and isinstance(payload, threading.Event):
				self._sock.close()
				self._stopped.set()
				payload.set()
				break

	def write(self, request):
		try:
			if len(request) == 4:
				facility, tag, severity, message = request
				priority = encode_priority(facility, severity)
			else:
				tag, priority, message = request
				if isinstance(priority, str):
					priority = severity_to_number(priority)
			self._sock.sendto(build_packet(priority, tag, message), (self.host, self.port))
		except (OSError, ValueError, TypeError) as e:
			# best effort: failures are counted, never raised
			self.dropped += 1
			if self.logger != None:
				self.logger.debug('Dropped syslog packet to %s:%s: %s' % (self.host, self.port, e))
