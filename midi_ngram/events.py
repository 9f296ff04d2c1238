import dataclasses
import logging
import typing

import midi_ngram.constants


logger = logging.getLogger(__name__)


@dataclasses.dataclass (frozen=True)
class NoteEvent:

	"""
	A single sounded note, positioned in ticks of its source file.
	"""

	channel: int
	start_tick: int
	pitch: int
	duration_ticks: int


@dataclasses.dataclass
class ChannelTokens:

	"""
	Index-aligned pitch and duration tokens for one channel, ordered by start tick.
	"""

	pitches: typing.List[str] = dataclasses.field(default_factory=list)
	durations: typing.List[str] = dataclasses.field(default_factory=list)


	def __len__ (self) -> int:

		return len(self.pitches)


def make_token (values: typing.Iterable[int]) -> str:

	"""
	Serialize a set of simultaneous values as a comma-joined ascending list.
	"""

	return ",".join(str(value) for value in sorted(set(values)))


def group_events (
	events: typing.Iterable[NoteEvent],
	channels: typing.Optional[typing.Sequence[int]] = None,
	merge_channels: bool = False
) -> typing.Dict[int, ChannelTokens]:

	"""Group note events into per-channel chord tokens.

	Events sharing a channel and start tick form one token: the set of their
	pitches in ``pitches`` and, at the same index, the set of their durations in
	``durations``.

	Parameters:
		events: Note events from one file, in any order
		channels: Channels to keep. Empty or None keeps every channel.
		merge_channels: Fold every kept event into channel 0

	Returns:
		Tokens keyed by channel. Channels without events are absent.
	"""

	allowed = set(channels) if channels else None

	# channel -> start tick -> (pitches, durations)
	grouped: typing.Dict[int, typing.Dict[int, typing.Tuple[typing.List[int], typing.List[int]]]] = {}

	for event in events:

		if event.channel == midi_ngram.constants.PERCUSSION_CHANNEL:
			continue

		if allowed is not None and event.channel not in allowed:
			continue

		channel = 0 if merge_channels else event.channel

		pitches, durations = grouped.setdefault(channel, {}).setdefault(event.start_tick, ([], []))
		pitches.append(event.pitch)
		durations.append(event.duration_ticks)

	result: typing.Dict[int, ChannelTokens] = {}

	for channel in sorted(grouped):

		tokens = ChannelTokens()

		for start_tick in sorted(grouped[channel]):
			pitches, durations = grouped[channel][start_tick]
			tokens.pitches.append(make_token(pitches))
			tokens.durations.append(make_token(durations))

		logger.debug(f"Channel {channel}: {len(tokens)} tokens")

		result[channel] = tokens

	return result
