"""Chat command events and replies exchanged with the chat transport."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChannelUser(_CamelModel):
    display_name: str


class ChannelSource(_CamelModel):
    """Where a command came from; replies go back to ``channel_id``."""

    channel_id: str
    user: Optional[ChannelUser] = None

    def reply_prefix(self) -> str:
        return f"{self.user.display_name}: " if self.user else ""


class CommandEvent(_CamelModel):
    """An inbound chat command such as ``pota 20m cw``."""

    command: str
    arg: str = ""
    source: ChannelSource


class Reply(_CamelModel):
    channel_id: str
    text: str


class CommandMetadata(_CamelModel):
    """Help text registered with the chat service for a command."""

    name: str
    short_help: str
    full_help: str
