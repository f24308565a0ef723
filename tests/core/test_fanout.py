"""Tests for the fan-out coordinator."""

import anyio
import pytest

from core.domain.operations import HunterOperation
from core.domain.outcomes import Failure, FailureKind, Success
from core.interfaces.hunter_service import HunterService
from core.services.fanout import fan_out


class StubService:
    """In-memory service with an optional delay and failure mode."""

    def __init__(self, name, payload=None, *, delay=0.0, error=None):
        self.name = name
        self.payload = payload
        self.delay = delay
        self.error = error
        self.seen = []

    async def execute(self, operation):
        self.seen.append(operation)
        if self.delay:
            await anyio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return Success(backend=self.name, payload=self.payload)


class BarrierService:
    """Only finishes once its partner has started, so a sequential fan-out would hang."""

    def __init__(self, name, started, partner_started):
        self.name = name
        self.started = started
        self.partner_started = partner_started

    async def execute(self, operation):
        self.started.set()
        await self.partner_started.wait()
        return Success(backend=self.name, payload=[])


class TestFanOut:
    def test_stub_satisfies_protocol(self):
        assert isinstance(StubService("a"), HunterService)

    @pytest.mark.anyio
    async def test_outcomes_follow_configured_order(self):
        slow = StubService("mongo", ["a"], delay=0.05)
        fast = StubService("postgres", ["b"])

        outcomes = await fan_out([slow, fast], HunterOperation.list())

        assert [o.backend for o in outcomes] == ["mongo", "postgres"]
        assert [o.payload for o in outcomes] == [["a"], ["b"]]

    @pytest.mark.anyio
    async def test_every_service_receives_the_same_operation(self):
        services = [StubService("mongo"), StubService("postgres")]
        operation = HunterOperation.find_by_name("Ana")

        await fan_out(services, operation)

        assert all(s.seen == [operation] for s in services)

    @pytest.mark.anyio
    async def test_calls_run_concurrently(self):
        a_started, b_started = anyio.Event(), anyio.Event()
        services = [
            BarrierService("mongo", a_started, b_started),
            BarrierService("postgres", b_started, a_started),
        ]

        with anyio.fail_after(2):
            outcomes = await fan_out(services, HunterOperation.list())

        assert all(isinstance(o, Success) for o in outcomes)

    @pytest.mark.anyio
    async def test_raising_service_becomes_failure(self):
        broken = StubService("mongo", error=RuntimeError("boom"))
        healthy = StubService("postgres", [{"id": 1}], delay=0.01)

        outcomes = await fan_out([broken, healthy], HunterOperation.list())

        assert isinstance(outcomes[0], Failure)
        assert outcomes[0].kind is FailureKind.UNEXPECTED
        assert isinstance(outcomes[0].cause, RuntimeError)
        assert outcomes[1] == Success(backend="postgres", payload=[{"id": 1}])

    @pytest.mark.anyio
    async def test_failure_outcome_is_not_raised(self):
        class Failing:
            name = "mongo"

            async def execute(self, operation):
                return Failure(backend="mongo", kind=FailureKind.NETWORK, reason="down")

        outcomes = await fan_out([Failing(), StubService("postgres", [])], HunterOperation.list())

        assert [type(o) for o in outcomes] == [Failure, Success]

    @pytest.mark.anyio
    async def test_no_services(self):
        assert await fan_out([], HunterOperation.list()) == []
