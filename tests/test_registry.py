"""Tests for provider registry arbitration."""

import pytest
from typing import Optional
from intent_context.config import IntentConfig
from intent_context.providers.base import BaseProvider, IntentBundle
from intent_context.providers.registry import ProviderRegistry


class FakeProvider(BaseProvider):
    """Scriptable provider that records calls."""

    def __init__(self, name, detects=True, bundle=None, detect_error=None, collect_error=None):
        self._name = name
        self.detects = detects
        self.bundle = bundle
        self.detect_error = detect_error
        self.collect_error = collect_error
        self.detect_calls = 0
        self.collect_calls = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return f"fake {self._name}"

    async def detect(self) -> bool:
        self.detect_calls += 1
        if self.detect_error:
            raise self.detect_error
        return self.detects

    async def collect(self) -> Optional[IntentBundle]:
        self.collect_calls += 1
        if self.collect_error:
            raise self.collect_error
        return self.bundle


def bundle_from(source):
    return IntentBundle(goals=[f"goal from {source}"], confidence=0.1, source=source)


def test_registration_order_is_preserved():
    registry = ProviderRegistry()
    names = ["b", "a", "c"]
    for name in names:
        registry.register(FakeProvider(name))

    assert [p.name for p in registry.get_all_providers()] == names
    assert registry.get_provider("a").name == "a"
    assert registry.get_provider("missing") is None


def test_duplicate_name_keeps_first():
    registry = ProviderRegistry()
    first = FakeProvider("dup")
    registry.register(first)
    registry.register(FakeProvider("dup"))

    assert registry.get_provider("dup") is first
    assert len(registry.get_all_providers()) == 2


@pytest.mark.asyncio
async def test_short_circuits_on_first_bundle():
    first = FakeProvider("first", bundle=None)
    second = FakeProvider("second", bundle=bundle_from("second"))
    third = FakeProvider("third", bundle=bundle_from("third"))

    registry = ProviderRegistry()
    for provider in (first, second, third):
        registry.register(provider)

    bundle = await registry.detect_and_collect()

    assert bundle.source == "second"
    assert first.collect_calls == 1
    assert third.detect_calls == 0
    assert third.collect_calls == 0


@pytest.mark.asyncio
async def test_undetected_provider_is_not_collected():
    skipped = FakeProvider("skipped", detects=False, bundle=bundle_from("skipped"))
    used = FakeProvider("used", bundle=bundle_from("used"))

    registry = ProviderRegistry()
    registry.register(skipped)
    registry.register(used)

    bundle = await registry.detect_and_collect()
    assert bundle.source == "used"
    assert skipped.collect_calls == 0


@pytest.mark.asyncio
async def test_provider_errors_fall_through():
    broken_detect = FakeProvider("a", detect_error=OSError("denied"))
    broken_collect = FakeProvider("b", collect_error=ValueError("bad"))
    working = FakeProvider("c", bundle=bundle_from("c"))

    registry = ProviderRegistry()
    for provider in (broken_detect, broken_collect, working):
        registry.register(provider)

    bundle = await registry.detect_and_collect()
    assert bundle.source == "c"


@pytest.mark.asyncio
async def test_exhausted_returns_none():
    registry = ProviderRegistry()
    registry.register(FakeProvider("a", detects=False))
    registry.register(FakeProvider("b", bundle=None))

    assert await registry.detect_and_collect() is None
    assert await ProviderRegistry().detect_and_collect() is None


@pytest.mark.asyncio
async def test_explicit_provider_is_used_exclusively():
    auto = FakeProvider("auto", bundle=bundle_from("auto"))
    chosen = FakeProvider("chosen", bundle=bundle_from("chosen"))

    registry = ProviderRegistry(explicit_provider="chosen")
    registry.register(auto)
    registry.register(chosen)

    bundle = await registry.detect_and_collect()
    assert bundle.source == "chosen"
    assert auto.detect_calls == 0


@pytest.mark.asyncio
async def test_explicit_provider_never_falls_back():
    auto = FakeProvider("auto", bundle=bundle_from("auto"))
    chosen = FakeProvider("chosen", detects=False, bundle=bundle_from("chosen"))

    registry = ProviderRegistry(explicit_provider="chosen")
    registry.register(auto)
    registry.register(chosen)

    assert await registry.detect_and_collect() is None
    assert chosen.collect_calls == 0
    assert auto.detect_calls == 0


@pytest.mark.asyncio
async def test_explicit_unknown_or_failing_provider_returns_none():
    registry = ProviderRegistry(explicit_provider="ghost")
    registry.register(FakeProvider("auto", bundle=bundle_from("auto")))
    assert await registry.detect_and_collect() is None

    registry = ProviderRegistry(explicit_provider="boom")
    registry.register(FakeProvider("boom", collect_error=RuntimeError("x")))
    assert await registry.detect_and_collect() is None


def test_auto_discover_registers_builtins_in_order(tmp_path):
    config = IntentConfig(
        antigravity_brain_dir=tmp_path / "brain",
        claude_dir=tmp_path / ".claude",
        working_dir=tmp_path,
    )
    registry = ProviderRegistry()
    registry.auto_discover(config)

    assert [p.name for p in registry.get_all_providers()] == [
        "antigravity",
        "claude-code",
        "cursor",
        "aider",
    ]


@pytest.mark.asyncio
async def test_generate_manifest():
    registry = ProviderRegistry()
    registry.register(FakeProvider("yes"))
    registry.register(FakeProvider("no", detects=False))
    registry.register(FakeProvider("err", detect_error=OSError("x")))

    manifest = await registry.generate_manifest()

    assert manifest["detected"] == 1
    assert [p["detected"] for p in manifest["providers"]] == [True, False, False]
    assert manifest["providers"][0]["description"] == "fake yes"
    assert manifest["explicit_provider"] is None
