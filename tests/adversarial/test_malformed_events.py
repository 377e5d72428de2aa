"""Adversarial tests: hostile or broken event payloads must never escape.

A payload that blows up during extraction or rendering costs exactly one
announcement; the host's dispatch and later events are unaffected.
"""

from __future__ import annotations

import logging

import pytest

from autoannouncer.models.events import GameEndedEvent, PlayerJoinedEvent

LOGGER = "autoannouncer.core.bridge"


class _ExplodingPlayer:
    @property
    def player_name(self):
        raise KeyError("client already disposed")

    room = "Lobby"


class _ExplodingName:
    def __str__(self):
        raise UnicodeError("cannot decode name")


class _ExplodingReasonHolder:
    @property
    def reason(self):
        raise RuntimeError("game state torn down")


class TestMalformedPlayerJoined:
    @pytest.mark.parametrize(
        "event",
        [_ExplodingPlayer(), type("E", (), {"player_name": _ExplodingName()})()],
        ids=["property-raises", "str-raises"],
    )
    def test_skipped_and_logged(self, bridge, games, caplog, event):
        with caplog.at_level(logging.ERROR, logger=LOGGER):
            bridge.on_player_joined(event)

        assert all(game.received == [] for game in games)
        errors = [r for r in caplog.records if r.name == LOGGER]
        assert len(errors) == 1
        assert errors[0].exc_info is not None

    def test_none_payload_uses_fallbacks(self, bridge, games):
        bridge.on_player_joined(None)
        assert games[0].received == ["欢迎 Unknown 加入游戏！"]

    def test_later_events_unaffected(self, bridge, games):
        bridge.on_player_joined(_ExplodingPlayer())
        bridge.on_player_joined(PlayerJoinedEvent(player_name="Ann"))
        assert games[0].received == ["欢迎 Ann 加入游戏！"]


class TestMalformedGameEnded:
    def test_reason_attribute_raises(self, bridge, games, caplog):
        with caplog.at_level(logging.ERROR, logger=LOGGER):
            bridge.on_game_ended(_ExplodingReasonHolder())

        assert all(game.received == [] for game in games)
        assert any("game end" in r.getMessage() for r in caplog.records)

    def test_unprintable_reason_becomes_unknown(self, bridge, games):
        bridge.on_game_ended(GameEndedEvent(reason=_ExplodingName()))
        assert games[0].received == ["游戏结束！原因：Unknown"]


class TestThroughTheBus:
    def test_bus_dispatch_not_disturbed(self, bridge, bus, games):
        other = []
        bus.subscribe("player_joined", other.append)
        bridge.enable()

        bad = _ExplodingPlayer()
        bad.kind = "player_joined"
        bus.publish(bad)

        assert other == [bad]
        assert all(game.received == [] for game in games)


class TestHostileValues:
    def test_placeholder_injection_in_name(self, bridge, games):
        bridge.on_player_joined(PlayerJoinedEvent(player_name="{reason}{time}"))
        assert games[0].received == ["欢迎 {reason}{time} 加入游戏！"]

    def test_huge_name_passes_through(self, bridge, games):
        name = "x" * 10_000
        bridge.on_player_joined(PlayerJoinedEvent(player_name=name))
        assert games[0].received == [f"欢迎 {name} 加入游戏！"]
