"""Bundled operation registries merged into the provider catalog.

Registries are listed lowest precedence first: generated resources, then
handwritten resources, then the IAM subset.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    """What the host needs to dispatch one named operation.

    Attributes:
        service: Endpoint table key of the API the operation talks to.
        kind: ``"resource"`` or ``"data_source"``.
        origin: Registry the descriptor came from.
    """

    service: str
    kind: str
    origin: str


def _registry(origin: str, entries: Mapping[str, tuple[str, str]]) -> Mapping[str, OperationDescriptor]:
    return MappingProxyType(
        {name: OperationDescriptor(service=service, kind=kind, origin=origin) for name, (service, kind) in entries.items()}
    )


GENERATED_RESOURCES = _registry(
    "generated",
    {
        "google_artifact_registry_repository": ("artifact_registry", "resource"),
        "google_bigquery_dataset": ("bigquery", "resource"),
        "google_bigquery_table": ("bigquery", "resource"),
        "google_cloud_run_v2_service": ("cloud_run_v2", "resource"),
        "google_cloudfunctions_function": ("cloud_functions", "resource"),
        "google_compute_instance": ("compute", "resource"),
        "google_compute_network": ("compute", "resource"),
        "google_compute_subnetwork": ("compute", "resource"),
        "google_dns_managed_zone": ("dns", "resource"),
        "google_kms_key_ring": ("kms", "resource"),
        "google_pubsub_topic": ("pubsub", "resource"),
        "google_pubsub_subscription": ("pubsub", "resource"),
        "google_secret_manager_secret": ("secret_manager", "resource"),
        "google_sql_database_instance": ("sql", "resource"),
        "google_storage_bucket": ("storage", "resource"),
    },
)

HANDWRITTEN_RESOURCES = _registry(
    "handwritten",
    {
        "google_container_cluster": ("container", "resource"),
        "google_container_node_pool": ("container", "resource"),
        "google_project": ("resource_manager", "resource"),
        "google_project_service": ("service_usage", "resource"),
        "google_service_account": ("iam", "resource"),
        "google_service_account_key": ("iam", "resource"),
        "google_client_config": ("resource_manager", "data_source"),
        "google_compute_zones": ("compute", "data_source"),
    },
)

IAM_RESOURCES = _registry(
    "iam",
    {
        "google_project_iam_member": ("resource_manager", "resource"),
        "google_project_iam_binding": ("resource_manager", "resource"),
        "google_storage_bucket_iam_member": ("storage", "resource"),
        "google_pubsub_topic_iam_member": ("pubsub", "resource"),
        "google_service_account_iam_member": ("iam", "resource"),
    },
)


def bundled_sources() -> Sequence[tuple[str, Mapping[str, OperationDescriptor]]]:
    """Return the bundled registries in merge order.

    Example:
        >>> [name for name, _ in bundled_sources()]
        ['generated', 'handwritten', 'iam']
    """
    return (
        ("generated", GENERATED_RESOURCES),
        ("handwritten", HANDWRITTEN_RESOURCES),
        ("iam", IAM_RESOURCES),
    )


__all__ = [
    "GENERATED_RESOURCES",
    "HANDWRITTEN_RESOURCES",
    "IAM_RESOURCES",
    "OperationDescriptor",
    "bundled_sources",
]
