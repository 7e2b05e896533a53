"""
plugins/ip_finder/probes/ecs.py - ECS 태스크 프로브

awsvpc 네트워크 모드 태스크의 ENI attachment 상세(privateIPv4Address)를 비교합니다.
"""

from __future__ import annotations

from typing import Any

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, chunked

# describe_tasks 한 번에 조회 가능한 최대 태스크 수
DESCRIBE_TASKS_BATCH = 100

ECS_FIELDS: FieldSpec = (
    ("TaskArn", "taskArn"),
    ("TaskDefinitionArn", "taskDefinitionArn"),
    ("DesiredStatus", "desiredStatus"),
    ("LastStatus", "lastStatus"),
    ("LaunchType", "launchType"),
    ("PlatformVersion", "platformVersion"),
    ("Cluster", "clusterArn"),
)


def task_addresses(task: dict[str, Any]) -> list[str]:
    """태스크 attachment의 privateIPv4Address 값 목록"""
    return [
        detail["value"]
        for attachment in task.get("attachments", [])
        for detail in attachment.get("details", [])
        if detail.get("name") == "privateIPv4Address" and detail.get("value")
    ]


class TaskProbe(Probe):
    """[5/8] ECS 태스크"""

    category = ResourceCategory.ECS_TASK
    step = "5"
    service = "ecs"
    fields = ECS_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        cluster_arns = ctx.paginate("ecs", "list_clusters", "clusterArns")

        for cluster_arn in cluster_arns:
            task_arns = ctx.paginate("ecs", "list_tasks", "taskArns", cluster=cluster_arn)
            for batch in chunked(task_arns, DESCRIBE_TASKS_BATCH):
                for task in self._describe_tasks(ctx, cluster_arn, list(batch)):
                    if any(ctx.matches(address) for address in task_addresses(task)):
                        return self.build_result(ctx, task)

        return None

    def _describe_tasks(self, ctx: ProbeContext, cluster_arn: str, task_arns: list[str]) -> list[dict[str, Any]]:
        def _describe() -> list[dict[str, Any]]:
            response = ctx.client("ecs").describe_tasks(cluster=cluster_arn, tasks=task_arns)
            return response.get("tasks", [])

        return ctx.call("ecs", "describe_tasks", _describe, default=[], resource_id=cluster_arn)
