"""
Template builders.

Turns a FormData record into the JSON documents pasted into the hosting
panel: the database services and the n8n application services.
Builders are pure; the caller is responsible for required-field checks.
"""

import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from form_data import FIELD_KEYS, FormData

logger = logging.getLogger(__name__)

POSTGRES_SERVICE_NAME = "n8n_postgres"
POSTGRES_IMAGE = "postgres:16"
REDIS_SERVICE_NAME = "redis_n8n"
REDIS_IMAGE = "redis:7"

N8N_IMAGE = "n8nio/n8n:latest"
N8N_PORT = 5678
N8N_TIMEZONE = "America/Sao_Paulo"


class TemplateKind(Enum):
    DATABASE = "database"
    N8N = "n8n"


def build_database_template(form: FormData) -> Dict[str, Any]:
    """PostgreSQL and Redis service descriptors."""
    return {
        "services": [
            {
                "type": "postgres",
                "data": {
                    "projectName": form.project_name,
                    "serviceName": POSTGRES_SERVICE_NAME,
                    "image": POSTGRES_IMAGE,
                    "password": form.postgres_password,
                },
            },
            {
                "type": "redis",
                "data": {
                    "projectName": form.project_name,
                    "serviceName": REDIS_SERVICE_NAME,
                    "image": REDIS_IMAGE,
                    "password": form.redis_password,
                },
            },
        ]
    }


def internal_host(form: FormData, service_name: str) -> str:
    """Host name other services in the project use to reach `service_name`."""
    return f"{form.project_name}_{service_name}"


def _n8n_env(form: FormData) -> str:
    env = [
        ("N8N_HOST", form.domain_name),
        ("N8N_PROTOCOL", "https"),
        ("N8N_PORT", str(N8N_PORT)),
        ("N8N_EDITOR_BASE_URL", f"https://{form.domain_name}/"),
        ("WEBHOOK_URL", f"https://{form.n8n_webhook_domain}/"),
        ("N8N_ENCRYPTION_KEY", form.encryption_key),
        ("GENERIC_TIMEZONE", N8N_TIMEZONE),
        ("DB_TYPE", "postgresdb"),
        ("DB_POSTGRESDB_HOST", internal_host(form, POSTGRES_SERVICE_NAME)),
        ("DB_POSTGRESDB_PORT", "5432"),
        ("DB_POSTGRESDB_DATABASE", form.project_name),
        ("DB_POSTGRESDB_USER", "postgres"),
        ("DB_POSTGRESDB_PASSWORD", form.postgres_password),
        ("EXECUTIONS_MODE", "queue"),
        ("QUEUE_BULL_REDIS_HOST", internal_host(form, REDIS_SERVICE_NAME)),
        ("QUEUE_BULL_REDIS_PORT", "6379"),
        ("QUEUE_BULL_REDIS_PASSWORD", form.redis_password),
        ("QUEUE_BULL_REDIS_DB", "2"),
    ]
    return "\n".join(f"{key}={value}" for key, value in env)


def _n8n_service(
    form: FormData, service_name: str, command: str, env: str, host: str = ""
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "projectName": form.project_name,
        "serviceName": service_name,
        "source": {"type": "image", "image": N8N_IMAGE},
        "deploy": {"replicas": 1, "command": command, "zeroDowntime": True},
        "env": env,
        "domains": [],
    }
    if host:
        data["domains"].append({"host": host, "port": N8N_PORT})
    return {"type": "app", "data": data}


def build_n8n_template(form: FormData) -> Dict[str, Any]:
    """Editor, webhook processor and queue worker sharing one environment."""
    env = _n8n_env(form)
    services: List[Dict[str, Any]] = [
        _n8n_service(form, "n8n_editor", "n8n start", env, form.domain_name),
        _n8n_service(
            form, "n8n_webhook", "n8n webhook", env, form.n8n_webhook_domain
        ),
        _n8n_service(form, "n8n_worker", "n8n worker --concurrency=10", env),
    ]
    return {"services": services}


TEMPLATE_BUILDERS: Dict[TemplateKind, Callable[[FormData], Dict[str, Any]]] = {
    TemplateKind.DATABASE: build_database_template,
    TemplateKind.N8N: build_n8n_template,
}

# Fields each builder reads; the controller requires exactly these.
REQUIRED_FIELDS: Dict[TemplateKind, Tuple[str, ...]] = {
    TemplateKind.DATABASE: ("projectName", "redisPassword", "postgresPassword"),
    TemplateKind.N8N: FIELD_KEYS,
}


def required_fields(kind: TemplateKind) -> Tuple[str, ...]:
    try:
        return REQUIRED_FIELDS[kind]
    except KeyError:
        raise ValueError(f"Unknown template kind: {kind!r}") from None


def build_template(kind: TemplateKind, form: FormData) -> Dict[str, Any]:
    try:
        builder = TEMPLATE_BUILDERS[kind]
    except KeyError:
        raise ValueError(f"Unknown template kind: {kind!r}") from None
    return builder(form)


def render_template(template: Dict[str, Any]) -> str:
    """Pretty-print a template as JSON with 2-space indentation."""
    return json.dumps(template, indent=2, ensure_ascii=False)


def generate_code(kind: TemplateKind, form: FormData) -> str:
    code = render_template(build_template(kind, form))
    logger.info("Generated %s template (%d chars)", kind.value, len(code))
    return code
