"""Announcement template configuration: the one persisted model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_PLAYER_JOIN_MESSAGE = "欢迎 {player} 加入游戏！"
DEFAULT_GAME_ENDED_MESSAGE = "游戏结束！原因：{reason}"


class AnnouncementConfig(BaseModel):
    """Operator-editable announcement templates.

    Persisted as ``{"playerJoinMessage": ..., "gameEndedMessage": ...}``.
    Field names are matched case-insensitively on read, and a missing or
    ``null`` field falls back to its own default; the other field is kept.

    Examples
    --------
    >>> cfg = AnnouncementConfig.model_validate({"PLAYERJOINMESSAGE": "hi {player}"})
    >>> cfg.player_join_message
    'hi {player}'
    >>> cfg.game_ended_message == DEFAULT_GAME_ENDED_MESSAGE
    True
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    player_join_message: str = Field(
        default=DEFAULT_PLAYER_JOIN_MESSAGE, alias="playerJoinMessage"
    )
    game_ended_message: str = Field(
        default=DEFAULT_GAME_ENDED_MESSAGE, alias="gameEndedMessage"
    )

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias

        matched: dict[str, Any] = {}
        for key, value in data.items():
            alias = lookup.get(str(key).lower())
            # null is treated as an absent key
            if alias is None or value is None:
                continue
            matched[alias] = value
        return matched

    def to_file_dict(self) -> dict[str, str]:
        """Return the on-disk representation (camelCase keys)."""
        return self.model_dump(by_alias=True)
