import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    """'<service>@<env>:<instance>' stamped on every log line, e.g. ecofinds-service@prod:3f2a9c1b7d0e"""
    # Container hostnames are the short container id, fall back to the pid locally
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{instance_id}'
