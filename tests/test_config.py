from udpsyslog.Config import Config


def test_defaults_without_file(tmp_path):
	config = Config(str(tmp_path / 'syslog.ini'), environ={}).load()
	assert config.get('host') is None
	assert config.get('host', 'fallback') == 'fallback'
	assert config.get('port') == 514
	assert config.get('tag') == 'syslogsend'
	assert config.get('facility') == 'user'


def test_file_values(tmp_path):
	path = tmp_path / 'syslog.ini'
	path.write_text('[syslog]\n# collector\nhost = loghost\nport=1514\n\ntag=backup\nfacility=17\n')
	config = Config(str(path), environ={}).load()
	assert config.get_plain_config() == {
		'host': 'loghost',
		'port': 1514,
		'tag': 'backup',
		'facility': 17,
	}


def test_environment_overrides_file(tmp_path):
	path = tmp_path / 'syslog.ini'
	path.write_text('host=loghost\nport=1514\n')
	config = Config(str(path), environ={'SYSLOG_HOST': 'other', 'SYSLOG_PORT': '2514'}).load()
	assert config.get('host') == 'other'
	assert config.get('port') == 2514


def test_command_line_aliases():
	config = Config('unused.ini', environ={})
	config.set('-l', '10.0.0.1')
	config.set('--port', '1514')
	config.set('-t', 'cli')
	config.set('--facility', 'local2')
	config.set('-p', '')
	assert config.get('host') == '10.0.0.1'
	assert config.get('port') == 514
	assert config.get('tag') == 'cli'
	assert config.get('facility') == 'local2'


def test_save_and_reload(tmp_path):
	path = str(tmp_path / 'syslog.ini')
	config = Config(path, environ={})
	config.set('port', '1514')
	config.set('tag', 'saved')
	config.save()

	again = Config(path, environ={}).load()
	assert again.get('host') is None
	assert again.get('port') == 1514
	assert again.get('tag') == 'saved'
