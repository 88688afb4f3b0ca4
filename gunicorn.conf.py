"""Gunicorn configuration for production."""

# Application
wsgi_app = 'quickzakat:create_app()'

# Server socket
bind = '0.0.0.0:8080'

# Worker processes
workers = 2
worker_class = 'sync'
timeout = 30
keepalive = 2

# Logging
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Process naming
proc_name = 'quick-zakat-calculator'

# Server mechanics
daemon = False
pidfile = None
umask = 0
