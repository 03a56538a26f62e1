"""Dispatch chat commands to the band-condition and POTA lookups.

Commands are handled one at a time: an event is processed to completion,
including its upstream fetch and every reply, before the next one is
read.  A failure while handling one command is logged and never stops
the loop.
"""

from __future__ import annotations

from typing import (
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    Tuple,
)

from seabird_radio import config
from seabird_radio.adapters.pota import (
    fetch_activations,
    find_most_recent_match,
    format_activation,
)
from seabird_radio.adapters.solar import fetch_solar_report
from seabird_radio.errors import ParseError, RadioError, UserInputError
from seabird_radio.middleware.logging import log_error, log_info
from seabird_radio.models import (
    Activation,
    Band,
    ChannelSource,
    CommandEvent,
    CommandMetadata,
    Mode,
    Reply,
    SolarConditionReport,
)

SolarSource = Callable[[], Awaitable[SolarConditionReport]]
SpotSource = Callable[[], Awaitable[List[Activation]]]

INVALID_BAND = "invalid_band"
INVALID_MODE = "invalid mode"
POTA_USAGE = "invalid pota command. Usage: pota <band> [mode]"

COMMANDS: Dict[str, CommandMetadata] = {
    "bands": CommandMetadata(
        name="bands",
        short_help="show HAM RF band conditions",
        full_help="show HAM RF band conditions",
    ),
    "pota": CommandMetadata(
        name="pota",
        short_help="find most recent POTA activation",
        full_help=(
            "find the most recent Parks on the Air activation. "
            "Usage: pota <band> [mode]. Default mode is SSB."
        ),
    ),
}


class MessageSink(Protocol):
    """Outbound half of the chat transport."""

    async def send_message(self, channel_id: str, text: str) -> None: ...


class ReplyCollector:
    """Sink that keeps replies in memory, in send order."""

    def __init__(self) -> None:
        self.replies: List[Reply] = []

    async def send_message(self, channel_id: str, text: str) -> None:
        self.replies.append(Reply(channel_id=channel_id, text=text))


def parse_pota_args(arg: str) -> Tuple[Band, Mode]:
    """Split ``<band> [mode]``; raises :class:`UserInputError` with the reply text."""
    parts = arg.split()
    if len(parts) == 1:
        band_text, mode = parts[0], Mode(config.DEFAULT_MODE)
    elif len(parts) == 2:
        band_text = parts[0]
        try:
            mode = Mode.parse(parts[1])
        except ParseError as e:
            raise UserInputError(INVALID_MODE) from e
    else:
        raise UserInputError(POTA_USAGE)

    try:
        band = Band.parse(band_text)
    except ParseError as e:
        raise UserInputError(INVALID_BAND) from e
    return band, mode


class CommandRouter:
    """Routes ``bands`` and ``pota`` commands to their handlers."""

    def __init__(
        self,
        solar_source: Optional[SolarSource] = None,
        spot_source: Optional[SpotSource] = None,
    ) -> None:
        self.solar_source = solar_source or fetch_solar_report
        self.spot_source = spot_source or fetch_activations

    async def run(self, events: AsyncIterator[CommandEvent], sink: MessageSink) -> None:
        """Consume events until the stream ends."""
        async for event in events:
            await self.dispatch(event, sink)

    async def dispatch(self, event: CommandEvent, sink: MessageSink) -> None:
        """Handle one event, containing any failure to this event."""
        source = event.source
        log_info(
            "command_received",
            command=event.command,
            arg=event.arg,
            channel=source.channel_id,
        )
        reply = None
        try:
            if event.command == "bands":
                await self.handle_bands(source, sink)
            elif event.command == "pota":
                await self.handle_pota(event.arg, source, sink)
            else:
                log_info("command_ignored", command=event.command)
        except UserInputError as e:
            reply = e.reply
        except RadioError as e:
            log_error(
                "command_failed",
                command=event.command,
                error=str(e),
                error_type=type(e).__name__,
            )
            reply = f"unable to complete {event.command}"
        except Exception as e:
            log_error("command_unexpected_error", command=event.command, error=str(e))

        if reply is None:
            return
        try:
            await sink.send_message(source.channel_id, source.reply_prefix() + reply)
        except Exception as e:
            log_error("reply_send_failed", command=event.command, error=str(e))

    async def handle_bands(self, source: ChannelSource, sink: MessageSink) -> None:
        report = await self.solar_source()
        await sink.send_message(
            source.channel_id, f"{source.reply_prefix()}current band conditions:"
        )
        for line in report.lines():
            await sink.send_message(source.channel_id, line)

    async def handle_pota(self, arg: str, source: ChannelSource, sink: MessageSink) -> None:
        band, mode = parse_pota_args(arg)
        activation = find_most_recent_match(await self.spot_source(), band, mode)
        if activation is None:
            text = f"no activations found on {band} over {mode}"
        else:
            text = format_activation(activation)
        await sink.send_message(source.channel_id, source.reply_prefix() + text)
