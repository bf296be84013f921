"""Cluster definition loading.

Reads a cluster YAML file into a :class:`~clusterfuncs.model.context.ClusterContext`.

File layout::

    cluster:
      name: example.k8s.local
      spec:
        cloudProvider: aws
        dnsZone: example.com
        masterInternalName: api.internal.example.k8s.local
    instance_groups:
      - name: master-us-east-1a
        role: Master
      - name: nodes
    tags:
      - _aws
    region: us-east-1

Region resolution precedence:
1. Explicit *region* argument (``--region`` CLI flag)
2. ``region`` key in the file
3. ``CLUSTERFUNCS_REGION`` / ``AWS_DEFAULT_REGION`` / ``AWS_REGION`` env vars
4. Hardcoded fallback (``us-east-1``)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from clusterfuncs.config.models import Cluster, InstanceGroup
from clusterfuncs.model.context import ClusterContext

logger = logging.getLogger(__name__)

_DEFAULT_REGION = "us-east-1"
_REGION_ENV_VARS = ("CLUSTERFUNCS_REGION", "AWS_DEFAULT_REGION", "AWS_REGION")


def resolve_region(region: Optional[str] = None, file_region: str = "") -> str:
    """Return the region for the run.

    Precedence: *region* → *file_region* → env vars → fallback.
    """
    if region:
        return region
    if file_region:
        return file_region
    for var in _REGION_ENV_VARS:
        value = os.environ.get(var, "")
        if value:
            return value
    return _DEFAULT_REGION


def context_from_dict(
    raw: Dict[str, Any],
    *,
    region: Optional[str] = None,
    tags: Optional[Iterable[str]] = None,
) -> ClusterContext:
    """Build a :class:`ClusterContext` from an already-parsed mapping.

    Raises :class:`ValueError` if the ``cluster`` section is missing.
    Schema violations surface as :class:`pydantic.ValidationError`.
    """
    cluster_raw = raw.get("cluster")
    if not cluster_raw:
        raise ValueError("Cluster definition has no 'cluster' section")

    cluster = Cluster.model_validate(cluster_raw)
    groups = [
        InstanceGroup.model_validate(ig)
        for ig in (raw.get("instance_groups") or [])
    ]
    file_tags = raw.get("tags") or []
    effective_tags = list(tags) if tags is not None else [str(t) for t in file_tags]

    return ClusterContext(
        cluster=cluster,
        instance_groups=tuple(groups),
        tags=frozenset(effective_tags),
        region=resolve_region(region, str(raw.get("region") or "")),
    )


def load_cluster_context(
    path: str | Path,
    *,
    region: Optional[str] = None,
    tags: Optional[Iterable[str]] = None,
) -> ClusterContext:
    """Load a cluster definition YAML file.

    Raises :class:`FileNotFoundError` if *path* does not exist and
    :class:`ValueError` if it is not valid YAML.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Cluster definition not found: {path}")

    with open(path, encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Cluster definition {path} is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Cluster definition {path} must be a mapping")

    ctx = context_from_dict(raw, region=region, tags=tags)
    logger.debug(
        "Loaded cluster %s (%d instance groups) from %s",
        ctx.cluster_name,
        len(ctx.instance_groups),
        path,
    )
    return ctx
