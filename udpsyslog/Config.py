import os

class Config:

    def __init__(self, config_file = "syslog.ini", environ = None):
        self.config_file = config_file
        self.environ = os.environ if environ is None else environ
        self.config = {
            'host': None,
            'port': 514,
            'tag': 'syslogsend',
            'facility': 'user',
        }

    def load(self):
        if os.path.isfile(self.config_file):
            with open(self.config_file, 'r') as file:
                fp = file.read()
                for line in fp.split("\n"):
                    line = line.strip()
                    if len(line) < 1: continue
                    if line[0] == '#': continue
                    if line[0] == '[': continue
                    (key, val) = line.split("=", 1)
                    self.set(key.strip(), val.strip())

        # Environment wins over the file
        if self.environ.get('SYSLOG_HOST'):
            self.set('host', self.environ.get('SYSLOG_HOST'))
        if self.environ.get('SYSLOG_PORT'):
            self.set('port', self.environ.get('SYSLOG_PORT'))
        return self

    def reload(self):
        self.load()

    def save(self):
        with open(self.config_file, mode='w') as file:
            file.write("[syslog]\n")
            for k,v in self.config.items():
                if v is None:
                    v = ''
                file.write("%s=%s\n" % (k, v))

    def get(self, key, default_value=None):
        value = self.config.get(key)
        return default_value if value is None else value

    def set(self, key, value):
        if key in ('-l', '--syslog', 'syslog_host', 'syslog', 'host'):
            self.config['host'] = value if len(value) > 0 else None
        elif key in ('-p', '--port', 'syslog_port', 'port'):
            self.config['port'] = int(value) if len(value) > 0 else 514
        elif key in ('-t', '--tag', 'tag') and len(value) > 0:
            self.config['tag'] = value
        elif key in ('-f', '--facility', 'facility') and len(value) > 0:
            self.config['facility'] = int(value) if value.isdigit() else value

    def get_plain_config(self):
        return self.config
