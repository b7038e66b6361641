"""Pick service and stage names that do not clash on the resolved cluster."""

from __future__ import annotations

import logging

from prisma_init.core.constants import DEFAULT_SERVICE, DEFAULT_STAGE, SUGGESTED_STAGE
from prisma_init.core.models import Cluster, qualified_project_name
from prisma_init.ports.cloud_client import CloudClient
from prisma_init.ports.prompter import Prompter

logger = logging.getLogger(__name__)


def project_exists(
    client: CloudClient,
    cluster: Cluster,
    service: str,
    stage: str,
    workspace: str | None,
) -> bool:
    """Return True if the project is already deployed.

    Any failure of the lookup counts as "does not exist".
    """
    name = qualified_project_name(cluster, service, workspace)
    try:
        exists = bool(client.get_project(name, stage))
    except Exception as e:  # noqa: BLE001
        logger.debug("Project lookup for %s@%s failed, assuming it is free: %s", name, stage, e)
        return False
    logger.debug("Project %s@%s exists: %s", name, stage, exists)
    return exists


def ask_for_service(prompter: Prompter, default: str) -> str:
    answer = prompter.ask("How do you want to call your service?", default=default)
    return answer or default


def ask_for_stage(prompter: Prompter, default: str) -> str:
    answer = prompter.ask("To which stage do you want to deploy?", default=default)
    return answer or default


def negotiate_service_and_stage(
    cluster: Cluster,
    workspace: str | None,
    folder_name: str,
    *,
    client: CloudClient,
    prompter: Prompter,
) -> tuple[str, str]:
    """Return (service, stage) for the cluster.

    Local clusters keep the default service unless that project already
    exists; remote clusters always get a service question. The stage is only
    asked for when the project under the chosen service still exists. Each
    question is asked at most once.
    """
    service = DEFAULT_SERVICE
    stage = DEFAULT_STAGE

    if not cluster.local or project_exists(client, cluster, service, stage, workspace):
        service = ask_for_service(prompter, default=folder_name or DEFAULT_SERVICE)

    if project_exists(client, cluster, service, stage, workspace):
        stage = ask_for_stage(prompter, default=SUGGESTED_STAGE)

    return service, stage
