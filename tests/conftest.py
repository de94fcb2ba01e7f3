pytest_plugins = ["vfsemu._pytest_plugin"]
