"""
Service context for log lines.

Identifies the running console process so log files from several terminals
sharing one data directory can be told apart.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'show-ticketing')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    try:
        host = socket.gethostname().split('.')[0] or 'localhost'
    except OSError:
        host = 'localhost'

    return f'{service_name}@{deploy_env}:{host}:{os.getpid()}'
