"""Threshold evaluation for a single resource quota."""

from typing import List

from resource_quota_check.models.quota_models import QuotaUsage, ResourceKind, Violation

TRACKED_RESOURCES = (ResourceKind.CPU, ResourceKind.MEMORY)


def evaluate_quota(quota: QuotaUsage, threshold: float) -> List[Violation]:
    """Compare a quota's used/hard values against ``threshold``.

    Returns one Violation per tracked dimension whose usage fraction is at
    or above the threshold, CPU first. A dimension without a hard limit is
    not compared.
    """
    violations = []
    for resource in TRACKED_RESOURCES:
        used, hard = quota.pair(resource)
        if hard == 0:
            continue
        percent_used = used / hard
        if percent_used >= threshold:
            violations.append(Violation(
                namespace=quota.namespace,
                quota=quota.name,
                resource=resource,
                used=used,
                limit=hard,
                percent_used=percent_used,
                threshold=threshold,
            ))
    return violations
