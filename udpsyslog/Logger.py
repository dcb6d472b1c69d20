from udpsyslog import Syslog
from udpsyslog.Codec import SEVERITY

class Logger:
	def __init__(self, tag, facility=None, sender=None):
		self.tag = tag
		self.facility = facility
		self.sender = sender

	def emergency(self, msg):
		self.store('emergency', msg)

	def alert(self, msg):
		self.store('alert', msg)

	def critical(self, msg):
		self.store('critical', msg)

	def error(self, msg):
		self.store('error', msg)

	def warning(self, msg):
		self.store('warning', msg)

	def warn(self, msg):
		self.store('warning', msg)

	def notice(self, msg):
		self.store('notice', msg)

	def log(self, msg):
		self.store('notice', msg)

	def info(self, msg):
		self.store('info', msg)

	def debug(self, msg):
		self.store('debug', msg)

	def store(self, severity, msg):
		level = SEVERITY[severity]
		target = self.sender if self.sender != None else Syslog
		if self.facility != None:
			target.send(self.facility, self.tag, level, msg)
		else:
			target.send(self.tag, level, msg)
