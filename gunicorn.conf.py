"""
Gunicorn configuration for the jawlog API.

Env vars that override defaults:
  PORT     — TCP port to bind (default: 8000)
  WORKERS  — number of worker processes (default: 2)

Run with:  gunicorn -c gunicorn.conf.py
"""
import os

wsgi_app = "jawlog.main:app"

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Requests are short DB round-trips; 2 workers fit a 512 MB container.
workers = int(os.environ.get("WORKERS", "2"))

# Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 60

# stdout only; application loggers write to the same stream.
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
