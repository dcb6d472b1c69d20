class SyslogError(Exception):
	pass


class UnknownSeverity(SyslogError, ValueError):
	def __init__(self, name):
		super().__init__('Unknown syslog severity: %r' % (name, ))
		self.name = name


class UnknownFacility(SyslogError, ValueError):
	def __init__(self, name):
		super().__init__('Unknown syslog facility: %r' % (name, ))
		self.name = name


class HostResolutionError(SyslogError):
	def __init__(self, host, reason=None):
		super().__init__('Cannot resolve syslog host %r: %s' % (host, reason))
		self.host = host


class SocketOpenError(SyslogError):
	pass
