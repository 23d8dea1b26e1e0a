"""Gunicorn config for deployment: gunicorn -c gunicorn.conf.py program_review.main:app"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Each worker loads its own copy of the dataset; an upload or reload only
# refreshes the worker that served it.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 60
graceful_timeout = 30
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = "info"
