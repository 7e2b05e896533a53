"""
tests/plugins/ip_finder/test_probes_elb.py - 로드밸런서 프로브 테스트
"""

from plugins.ip_finder.probes.elb import ClassicLoadBalancerProbe, LoadBalancerProbe
from plugins.ip_finder.types import ResourceCategory

TARGET_IP = "10.0.1.100"

ALB = {
    "LoadBalancerArn": "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:loadbalancer/app/web/1",
    "LoadBalancerName": "web",
    "Type": "application",
    "Scheme": "internal",
    "State": {"Code": "active"},
    "DNSName": "internal-web-1.ap-northeast-2.elb.amazonaws.com",
    "VpcId": "vpc-0abc",
    "IpAddressType": "ipv4",
}

TG_ARN = "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:targetgroup/web-ip/1"


class TestLoadBalancerProbe:
    """LoadBalancerProbe 테스트"""

    def test_match_ip_target(self, fake_aws, probe_context):
        fake_aws.pages("elbv2", "describe_load_balancers", [{"LoadBalancers": [ALB]}])
        fake_aws.pages("elbv2", "describe_target_groups", [{"TargetGroups": [{"TargetGroupArn": TG_ARN}]}])
        fake_aws.clients["elbv2"].describe_target_health.return_value = {
            "TargetHealthDescriptions": [
                {"Target": {"Id": "10.0.1.50", "Port": 80}},
                {"Target": {"Id": TARGET_IP, "Port": 80}},
            ]
        }

        result = LoadBalancerProbe().attempt(probe_context)

        assert result is not None
        assert result.category == ResourceCategory.LOAD_BALANCER
        assert dict(result.details) == {
            "LoadBalancerName": "web",
            "Type": "application",
            "Scheme": "internal",
            "State": "active",
            "DNSName": "internal-web-1.ap-northeast-2.elb.amazonaws.com",
            "VpcId": "vpc-0abc",
        }
        assert dict(result.extras) == {"TargetGroupArn": TG_ARN}
        fake_aws.clients["elbv2"].describe_target_health.assert_called_once_with(TargetGroupArn=TG_ARN)

    def test_target_groups_scoped_to_load_balancer(self, fake_aws, probe_context):
        fake_aws.pages("elbv2", "describe_load_balancers", [{"LoadBalancers": [ALB]}])

        LoadBalancerProbe().attempt(probe_context)

        assert (
            "elbv2",
            "describe_target_groups",
            {"LoadBalancerArn": ALB["LoadBalancerArn"]},
        ) in fake_aws.paginate_kwargs

    def test_instance_targets_do_not_match(self, fake_aws, probe_context):
        """인스턴스 타입 타겟 ID는 IP와 불일치"""
        fake_aws.pages("elbv2", "describe_load_balancers", [{"LoadBalancers": [ALB]}])
        fake_aws.pages("elbv2", "describe_target_groups", [{"TargetGroups": [{"TargetGroupArn": TG_ARN}]}])
        fake_aws.clients["elbv2"].describe_target_health.return_value = {
            "TargetHealthDescriptions": [{"Target": {"Id": "i-0abc", "Port": 80}}]
        }

        assert LoadBalancerProbe().attempt(probe_context) is None

    def test_target_health_failure_continues(self, fake_aws, probe_context, client_error):
        """타겟 헬스 조회 실패는 해당 타겟 그룹만 건너뜀"""
        tg_ok = "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:targetgroup/ok/2"
        fake_aws.pages("elbv2", "describe_load_balancers", [{"LoadBalancers": [ALB]}])
        fake_aws.pages(
            "elbv2",
            "describe_target_groups",
            [{"TargetGroups": [{"TargetGroupArn": TG_ARN}, {"TargetGroupArn": tg_ok}]}],
        )
        fake_aws.clients["elbv2"].describe_target_health.side_effect = [
            client_error("TargetGroupNotFound"),
            {"TargetHealthDescriptions": [{"Target": {"Id": TARGET_IP}}]},
        ]

        result = LoadBalancerProbe().attempt(probe_context)

        assert result is not None
        assert dict(result.extras) == {"TargetGroupArn": tg_ok}
        assert len(probe_context.collector.errors) == 1


CLB = {
    "LoadBalancerName": "legacy",
    "DNSName": "internal-legacy-1.ap-northeast-2.elb.amazonaws.com",
    "Scheme": "internal",
    "VPCId": "vpc-0abc",
    "Instances": [{"InstanceId": "i-0001"}, {"InstanceId": "i-0002"}],
}


def _instance_response(ip_by_id):
    def describe_instances(InstanceIds):
        instance_id = InstanceIds[0]
        return {"Reservations": [{"Instances": [{"InstanceId": instance_id, "PrivateIpAddress": ip_by_id[instance_id]}]}]}

    return describe_instances


class TestClassicLoadBalancerProbe:
    """ClassicLoadBalancerProbe 테스트"""

    def test_match_registered_instance(self, fake_aws, probe_context):
        fake_aws.pages("elb", "describe_load_balancers", [{"LoadBalancerDescriptions": [CLB]}])
        fake_aws.clients["ec2"].describe_instances.side_effect = _instance_response(
            {"i-0001": "10.0.1.1", "i-0002": TARGET_IP}
        )

        result = ClassicLoadBalancerProbe().attempt(probe_context)

        assert result is not None
        assert result.category == ResourceCategory.CLASSIC_LOAD_BALANCER
        assert dict(result.details) == {
            "LoadBalancerName": "legacy",
            "DNSName": "internal-legacy-1.ap-northeast-2.elb.amazonaws.com",
            "Scheme": "internal",
            "VPCId": "vpc-0abc",
        }
        assert dict(result.extras) == {"InstanceId": "i-0002"}

    def test_clients_scoped_to_region(self, fake_aws, probe_context):
        """Classic LB 조회도 검색 리전으로 제한"""
        ClassicLoadBalancerProbe().attempt(probe_context)

        assert ("elb", "ap-northeast-2") in fake_aws.created

    def test_instance_lookup_memoized(self, fake_aws, probe_context):
        """여러 CLB에 등록된 같은 인스턴스는 한 번만 조회"""
        other = dict(CLB, LoadBalancerName="legacy-2", Instances=[{"InstanceId": "i-0001"}])
        first = dict(CLB, Instances=[{"InstanceId": "i-0001"}])
        fake_aws.pages("elb", "describe_load_balancers", [{"LoadBalancerDescriptions": [first, other]}])
        fake_aws.clients["ec2"].describe_instances.side_effect = _instance_response({"i-0001": "10.0.1.1"})

        assert ClassicLoadBalancerProbe().attempt(probe_context) is None
        assert fake_aws.clients["ec2"].describe_instances.call_count == 1
