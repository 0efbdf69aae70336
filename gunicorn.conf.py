# gunicorn.conf.py
import multiprocessing as mp
import os

wsgi_app = "epicurain.app:app"
bind = os.getenv("BIND", "0.0.0.0:8076")

# Uvicorn workers are async; each request only waits on one upstream call,
# so a worker per core is enough
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WEB_CONCURRENCY", mp.cpu_count() + 1))

# Must exceed the upstream model latency (LLM_REQUEST_TIMEOUT when set)
_llm_timeout = float(os.getenv("LLM_REQUEST_TIMEOUT") or 0)
timeout = int(os.getenv("TIMEOUT", max(120, int(_llm_timeout) + 30)))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))

# Settings and templates are loaded once in the master
preload_app = True

# Logs
accesslog = "-" if os.getenv("ACCESS_LOG", "1") == "1" else None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
