"""
Service context extraction for log traceability.

Identifies the running instance so interleaved logs from several
workers (granian processes, containers) can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'bus-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when available, otherwise the PID for local development
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
