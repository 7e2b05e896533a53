"""
plugins/ip_finder/probes/lambda_.py - Lambda 함수 프로브 (VPC 연결 함수)

Lambda Hyperplane ENI는 설명(Description)에 "AWS Lambda VPC ENI-<함수명>-..." 형식을 가지므로
서브넷별로 설명 와일드카드 + 대상 IP 필터를 걸어 ENI를 조회합니다.
"""

from __future__ import annotations

from typing import Any

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, get_path
from .ec2 import interface_addresses

LAMBDA_FIELDS: FieldSpec = (
    ("FunctionName", "FunctionName"),
    ("FunctionArn", "FunctionArn"),
    ("Runtime", "Runtime"),
    ("Handler", "Handler"),
    ("State", "State"),
    ("LastModified", "LastModified"),
    ("VpcConfig", "VpcConfig"),
)


def lambda_eni_filters(subnet_id: str, function_name: str, ip: str) -> list[dict[str, Any]]:
    return [
        {"Name": "subnet-id", "Values": [subnet_id]},
        {"Name": "description", "Values": [f"*Lambda*{function_name}*"]},
        {"Name": "private-ip-address", "Values": [ip]},
    ]


class FunctionProbe(Probe):
    """[6/8] Lambda 함수"""

    category = ResourceCategory.LAMBDA_FUNCTION
    step = "6"
    service = "lambda"
    fields = LAMBDA_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        functions = ctx.paginate("lambda", "list_functions", "Functions")

        for function in functions:
            subnet_ids = get_path(function, "VpcConfig.SubnetIds") or []
            name = function.get("FunctionName")
            if not subnet_ids or not name:
                continue

            for subnet_id in subnet_ids:
                interfaces = ctx.paginate(
                    "ec2",
                    "describe_network_interfaces",
                    "NetworkInterfaces",
                    Filters=lambda_eni_filters(subnet_id, name, ctx.ip),
                )
                if any(ctx.ip in interface_addresses(eni) for eni in interfaces):
                    return self.build_result(ctx, function)

        return None
