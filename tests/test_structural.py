"""Tests for the adapter, bridge, facade, flyweight and proxy examples."""

from decimal import Decimal

import pytest

from adapter_pattern import LegacyPaymentAdapter, LegacyPaymentGateway, ModernPaymentProcessor, checkout
from bridge_pattern import AdvancedRemote, Radio, RemoteControl, Tv
from facade_pattern import HomeTheaterFacade
from flyweight_pattern import Forest, TreeTypeFactory
from proxy_pattern import LazyImageProxy, ProtectedImageProxy, RealImage


class TestAdapter:
    def test_adapts_to_cents(self):
        adapter = LegacyPaymentAdapter(LegacyPaymentGateway())
        assert checkout(adapter, Decimal("19.99")) == "LEGACY-OK 1999 cents"

    def test_rounds_half_up(self):
        adapter = LegacyPaymentAdapter(LegacyPaymentGateway())
        assert adapter.pay(Decimal("0.005")) == "LEGACY-OK 1 cents"

    def test_negative_amount(self):
        with pytest.raises(ValueError):
            LegacyPaymentAdapter(LegacyPaymentGateway()).pay(Decimal("-1"))

    def test_modern_processor_unchanged(self):
        assert checkout(ModernPaymentProcessor(), Decimal("5")) == "Paid 5 via modern processor"


class TestBridge:
    def test_same_remote_drives_any_device(self):
        for device in (Tv(), Radio()):
            remote = RemoteControl(device)
            remote.toggle_power()
            remote.channel_up()
            assert device.is_enabled()
            assert device.get_channel() == 2

    def test_volume_is_clamped(self):
        remote = RemoteControl(Tv())
        for _ in range(20):
            remote.volume_up()
        assert remote.device.get_volume() == 100
        for _ in range(20):
            remote.volume_down()
        assert remote.device.get_volume() == 0

    def test_advanced_remote_mutes(self):
        remote = AdvancedRemote(Radio())
        remote.mute()
        assert remote.device.get_volume() == 0
        assert remote.device.status() == "Radio is off, volume 0, channel 1"


class TestFacade:
    def test_watch_and_end(self):
        theater = HomeTheaterFacade()
        steps = theater.watch_movie("Heat")
        assert steps[0] == "Lights dimmed to 10%"
        assert steps[-1] == "Playing 'Heat'"
        assert theater.player.now_playing == "Heat"

        ending = theater.end_movie()
        assert ending[0] == "Stopped 'Heat'"
        assert ending[-1] == "Lights on"
        assert theater.player.now_playing is None

    def test_end_without_movie(self):
        assert HomeTheaterFacade().end_movie() == []


class TestFlyweight:
    def test_types_are_shared(self):
        forest = Forest()
        first = forest.plant(0, 0, "Oak", "green", "rough")
        second = forest.plant(5, 5, "Oak", "green", "rough")
        forest.plant(1, 1, "Pine", "dark", "needles")
        assert first.tree_type is second.tree_type
        assert TreeTypeFactory.count() == 2
        assert len(forest.trees) == 3

    def test_draw_uses_extrinsic_position(self):
        forest = Forest()
        forest.plant(3, 4, "Birch", "white", "smooth")
        assert forest.draw() == ["Birch (white, smooth) at (3, 4)"]


class TestProxy:
    def test_lazy_loads_once(self):
        before = RealImage.loads
        proxy = LazyImageProxy("a.png")
        assert not proxy.loaded
        assert RealImage.loads == before

        assert proxy.display() == "Displaying a.png"
        proxy.display()
        assert proxy.loaded
        assert RealImage.loads == before + 1

    def test_protection_allows_admin(self):
        proxy = ProtectedImageProxy(LazyImageProxy("b.png"), "admin")
        assert proxy.display() == "Displaying b.png"

    def test_protection_denies_and_does_not_load(self):
        inner = LazyImageProxy("c.png")
        proxy = ProtectedImageProxy(inner, "guest")
        with pytest.raises(PermissionError):
            proxy.display()
        assert not inner.loaded

    def test_custom_roles(self):
        proxy = ProtectedImageProxy(LazyImageProxy("d.png"), "editor", allowed_roles=["editor"])
        assert proxy.display() == "Displaying d.png"
