"""Integration tests: event in, announcement out, through the real bus.

Covers the three reference scenarios (default join, default game end,
hot-reload to a timestamped template) plus a partially failing fleet.
"""

from __future__ import annotations

import re

from autoannouncer import AutoAnnouncerPlugin, GameEndedEvent, LocalEventBus, PlayerJoinedEvent
from autoannouncer.config import Settings


def _setup(tmp_path, games):
    bus = LocalEventBus()
    plugin = AutoAnnouncerPlugin(bus, lambda: games, settings=Settings(base_dir=tmp_path))
    plugin.enable()
    return bus, plugin


def test_player_joined_with_defaults(tmp_path, games):
    bus, _ = _setup(tmp_path, games)

    bus.publish(PlayerJoinedEvent(player_name="Ann", room="Lobby"))

    assert [g.received for g in games] == [["欢迎 Ann 加入游戏！"]] * len(games)


def test_game_ended_with_defaults(tmp_path, games):
    bus, _ = _setup(tmp_path, games)

    bus.publish(GameEndedEvent(reason="HostLeft"))

    assert [g.received for g in games] == [["游戏结束！原因：HostLeft"]] * len(games)


def test_reload_to_timestamped_template(tmp_path, games):
    bus, plugin = _setup(tmp_path, games)
    plugin.store.path.write_text(
        '{"playerJoinMessage": "{player} joined {room} at {time}"}', encoding="utf-8"
    )

    plugin.reload()
    bus.publish(PlayerJoinedEvent(player_name="Bo", room="Hub"))

    pattern = re.compile(r"^Bo joined Hub at \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
    for game in games:
        assert len(game.received) == 1
        assert pattern.match(game.received[0])
    # untouched field keeps its default
    assert plugin.config.game_ended_message == "游戏结束！原因：{reason}"


def test_one_broken_instance(tmp_path, make_game):
    fleet = [make_game("A"), make_game("B", broken=True), make_game("C")]
    bus, _ = _setup(tmp_path, fleet)

    bus.publish(GameEndedEvent(reason="HostLeft"))
    bus.publish(PlayerJoinedEvent(player_name="Cy"))

    assert fleet[0].received == ["游戏结束！原因：HostLeft", "欢迎 Cy 加入游戏！"]
    assert fleet[1].attempts == 2
    assert fleet[2].received == fleet[0].received


def test_silenced_announcement(tmp_path, games):
    bus, plugin = _setup(tmp_path, games)
    plugin.store.path.write_text(
        '{"playerJoinMessage": "", "gameEndedMessage": "bye"}', encoding="utf-8"
    )
    plugin.reload()

    bus.publish(PlayerJoinedEvent(player_name="Ann"))
    bus.publish(GameEndedEvent(reason="x"))

    assert games[0].received == ["bye"]


def test_disable_then_enable_again(tmp_path, games):
    bus, plugin = _setup(tmp_path, games)

    plugin.disable()
    bus.publish(PlayerJoinedEvent(player_name="Ghost"))
    plugin.enable()
    bus.publish(PlayerJoinedEvent(player_name="Ann"))

    assert games[0].received == ["欢迎 Ann 加入游戏！"]
    assert bus.subscriber_count() == 2
