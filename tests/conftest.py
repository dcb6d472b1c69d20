import socket

import pytest

from udpsyslog import Syslog


class Receiver:
	def __init__(self):
		self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
		self.sock.bind(('127.0.0.1', 0))
		self.sock.settimeout(2)
		self.host, self.port = self.sock.getsockname()

	def recv(self):
		data, _ = self.sock.recvfrom(65535)
		return data

	def close(self):
		self.sock.close()


@pytest.fixture
def receiver():
	r = Receiver()
	yield r
	r.close()


@pytest.fixture(autouse=True)
def no_running_sender():
	yield
	if Syslog.whereis() is not None:
		Syslog.stop(timeout=2)


class FailingSocket:
	"""Stands in for the UDP socket; every write fails."""

	def __init__(self):
		self.attempts = 0
		self.closed = False

	def sendto(self, data, address):
		self.attempts += 1
		raise OSError('network is unreachable')

	def getsockname(self):
		return ('0.0.0.0', 0)

	def close(self):
		self.closed = True


@pytest.fixture
def failing_socket():
	return FailingSocket()
