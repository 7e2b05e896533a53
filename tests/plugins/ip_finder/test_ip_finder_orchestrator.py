"""
tests/plugins/ip_finder/test_ip_finder_orchestrator.py - 멀티 리전 오케스트레이터 테스트
"""

import threading
from unittest.mock import patch

from core.parallel import ErrorCollector
from plugins.ip_finder.orchestrator import RegionSearcher, ResultCell, resolve_regions
from plugins.ip_finder.probes import Probe
from plugins.ip_finder.report import Reporter
from plugins.ip_finder.types import ProbeResult, ResourceCategory, SearchRequest

TARGET_IP = "10.0.1.100"


class RegionProbe(Probe):
    """지정 리전에서만 매칭되는 프로브"""

    category = ResourceCategory.NETWORK_INTERFACE
    step = "1"
    service = "ec2"

    def __init__(self, matching=()):
        self.matching = set(matching)
        self.visited = []
        self._lock = threading.Lock()

    def attempt(self, ctx):
        with self._lock:
            self.visited.append(ctx.region)
        if ctx.region in self.matching:
            return ProbeResult(category=self.category, details={"Region": ctx.region}, region=ctx.region)
        return None


def _result(region):
    return ProbeResult(category=ResourceCategory.EC2_INSTANCE, details={}, region=region)


class TestResolveRegions:
    """resolve_regions 테스트"""

    def test_explicit_regions_win(self, fake_aws):
        """명시 리전이 --all-regions보다 우선"""
        with patch("plugins.ip_finder.orchestrator.list_all_regions") as mock_all:
            regions = resolve_regions(fake_aws.session, ["us-east-1", "eu-west-1"], all_regions=True)

        assert regions == ["us-east-1", "eu-west-1"]
        mock_all.assert_not_called()

    def test_all_regions(self, fake_aws):
        with patch("plugins.ip_finder.orchestrator.list_all_regions", return_value=["ap-northeast-2", "us-east-1"]):
            assert resolve_regions(fake_aws.session, all_regions=True) == ["ap-northeast-2", "us-east-1"]

    def test_default_region(self, fake_aws):
        with patch("plugins.ip_finder.orchestrator.get_default_region", return_value="eu-central-1"):
            assert resolve_regions(fake_aws.session) == ["eu-central-1"]


class TestResultCell:
    """ResultCell 테스트"""

    def test_keeps_first_offer(self):
        cell = ResultCell()

        assert cell.value is None
        assert cell.offer(_result("us-east-1")) is True
        assert cell.offer(_result("eu-west-1")) is False
        assert cell.value.region == "us-east-1"


class TestSequentialSearch:
    """순차 검색 테스트"""

    def test_stops_before_next_region(self, fake_aws, fake_resolver):
        """리전 A에서 매칭되면 리전 B는 시작하지 않음"""
        probe = RegionProbe(matching={"region-a"})
        searcher = RegionSearcher(fake_aws.session, resolver=fake_resolver, probes=[probe])
        request = SearchRequest.create(TARGET_IP, ["region-a", "region-b"])

        outcome = searcher.search(request, account_id="123456789012")

        assert outcome.found
        assert outcome.result.region == "region-a"
        assert outcome.searched_regions == ("region-a",)
        assert outcome.account_id == "123456789012"
        assert probe.visited == ["region-a"]
        assert all(region != "region-b" for _, region in fake_aws.created)

    def test_searches_all_regions_when_not_found(self, fake_aws, fake_resolver):
        probe = RegionProbe()
        searcher = RegionSearcher(fake_aws.session, resolver=fake_resolver, probes=[probe])

        outcome = searcher.search(SearchRequest.create(TARGET_IP, ["region-a", "region-b", "region-c"]))

        assert not outcome.found
        assert outcome.searched_regions == ("region-a", "region-b", "region-c")
        assert probe.visited == ["region-a", "region-b", "region-c"]

    def test_parallel_flag_with_single_region_runs_sequentially(self, fake_aws, fake_resolver):
        searcher = RegionSearcher(fake_aws.session, resolver=fake_resolver, probes=[RegionProbe()])
        request = SearchRequest.create(TARGET_IP, ["region-a"], parallel=True)

        with patch.object(RegionSearcher, "_search_parallel") as mock_parallel:
            searcher.search(request)

        mock_parallel.assert_not_called()


class TestParallelSearch:
    """병렬 검색 테스트"""

    def test_match_in_later_region(self, fake_aws, fake_resolver):
        """리전 B의 매칭도 보고"""
        probe = RegionProbe(matching={"region-b"})
        searcher = RegionSearcher(fake_aws.session, resolver=fake_resolver, probes=[probe])
        request = SearchRequest.create(TARGET_IP, ["region-a", "region-b", "region-c"], parallel=True)

        outcome = searcher.search(request)

        assert outcome.found
        assert outcome.result.region == "region-b"
        assert outcome.searched_regions == ("region-a", "region-b", "region-c")
        assert sorted(probe.visited) == ["region-a", "region-b", "region-c"]

    def test_all_regions_complete_without_cancellation(self, fake_aws, fake_resolver):
        """여러 리전이 매칭돼도 모든 리전 작업이 완료될 때까지 대기"""
        probe = RegionProbe(matching={"region-a", "region-b"})
        searcher = RegionSearcher(fake_aws.session, resolver=fake_resolver, probes=[probe])
        request = SearchRequest.create(TARGET_IP, ["region-a", "region-b"], parallel=True)

        outcome = searcher.search(request)

        assert outcome.result.region in {"region-a", "region-b"}
        assert sorted(probe.visited) == ["region-a", "region-b"]

    def test_region_failure_treated_as_not_found(self, fake_aws, fake_resolver):
        """리전 작업 실패는 다른 리전 결과에 영향 없음"""
        collector = ErrorCollector()
        probe = RegionProbe(matching={"region-b"})
        searcher = RegionSearcher(fake_aws.session, collector=collector, resolver=fake_resolver, probes=[probe])

        with patch.object(RegionSearcher, "_search_region", side_effect=_fail_in("region-a", searcher)):
            outcome = searcher.search(SearchRequest.create(TARGET_IP, ["region-a", "region-b"], parallel=True))

        assert outcome.result.region == "region-b"
        assert [(e.region, e.operation) for e in collector.errors] == [("region-a", "search_region")]

    def test_buffered_output_not_interleaved(self, fake_aws, fake_resolver, record_console):
        """리전별 출력이 헤더와 단계 라인 단위로 묶여 출력"""
        searcher = RegionSearcher(
            fake_aws.session,
            reporter=Reporter(console=record_console),
            resolver=fake_resolver,
            probes=[RegionProbe()],
        )

        searcher.search(SearchRequest.create(TARGET_IP, ["region-a", "region-b"], parallel=True))

        lines = [line for line in record_console.file.getvalue().splitlines() if line.strip()]
        assert len(lines) == 4
        for header, step in (lines[0:2], lines[2:4]):
            assert "Searching in region:" in header
            assert step.startswith("[1/8]")


def _fail_in(failing_region, searcher):
    original = RegionSearcher._search_region

    def _search_region(request, region, buffered):
        if region == failing_region:
            raise RuntimeError(f"worker crashed in {region}")
        return original(searcher, request, region, buffered)

    return _search_region
