"""Resynthesis of analyzed phrases into per-channel note streams.

``PlaybackComposer`` turns each channel's pitch phrase table into a list of
``PlaybackUnit`` objects in one of three modes:

- **weighted** - ``loop`` independent draws, weighted by repetition count
- **ordered** - every phrase once, most repeated first
- **shuffled** - every phrase once, in random order

Each note gets a duration picked at random from the configured pool, or from
the durations observed on that channel when no pool is configured. When a
pause is configured a rest follows every phrase.
"""

import dataclasses
import logging
import random
import typing

import midi_ngram.config
import midi_ngram.constants
import midi_ngram.errors
import midi_ngram.naming
import midi_ngram.phrases
import midi_ngram.sampling


logger = logging.getLogger(__name__)


@dataclasses.dataclass (frozen=True)
class PlaybackUnit:

	"""
	A note or chord (or a rest, when there are no pitches) with a duration name.
	"""

	pitches: typing.Tuple[int, ...]
	duration: str


	@property
	def is_rest (self) -> bool:

		return not self.pitches


@dataclasses.dataclass
class ChannelPlayback:

	"""
	The note stream for one output channel.
	"""

	channel: int
	patch: int = midi_ngram.constants.DEFAULT_PATCH
	units: typing.List[PlaybackUnit] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class PlaybackScore:

	"""
	Simultaneous channel streams ready for a score writer.
	"""

	bpm: int
	ticks_per_quarter: int
	tracks: typing.List[ChannelPlayback] = dataclasses.field(default_factory=list)


class PlaybackComposer:

	"""
	Compose playback streams from phrase tables.
	"""

	def __init__ (self, config: midi_ngram.config.NgramConfig, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Initialize the composer with a validated configuration and a random source.
		"""

		self.config = config
		self.rng = rng or random.Random()


	@property
	def mode (self) -> str:

		if self.config.weight:
			return "weighted"

		return "shuffled" if self.config.shuffle_phrases else "ordered"


	def choose_patch (self) -> int:

		"""
		Return the patch for a channel: 0, or a random pick when random patches are enabled.
		"""

		if self.config.random_patch:
			return self.rng.choice(self.config.patches)

		return midi_ngram.constants.DEFAULT_PATCH


	def duration_pool (self, channel: int, observed: typing.Iterable[str]) -> typing.List[str]:

		"""
		Return the configured durations, or the ones observed on the channel.
		"""

		if self.config.durations:
			return list(self.config.durations)

		pool = sorted(observed)

		if not pool:
			raise midi_ngram.errors.ConfigurationError(
				f"No durations configured and none observed for channel {channel}"
			)

		return pool


	def select_phrases (self, channel: int, table: midi_ngram.phrases.PhraseTable) -> typing.List[str]:

		"""
		Return the phrases to play, in playback order, for the current mode.
		"""

		if self.config.weight:

			if not table:
				raise midi_ngram.errors.SamplingError(f"No phrases to sample for channel {channel}")

			return midi_ngram.sampling.sample_weighted(list(table.items()), self.config.loop, self.rng)

		phrases = [phrase for phrase, _ in midi_ngram.phrases.ranked_table(table)]

		if self.config.shuffle_phrases:
			self.rng.shuffle(phrases)

		return phrases


	def compose_channel (
		self,
		channel: int,
		table: midi_ngram.phrases.PhraseTable,
		observed_durations: typing.Iterable[str] = ()
	) -> ChannelPlayback:

		"""Build the note stream for one channel.

		Parameters:
			channel: Output channel
			table: The channel's pitch phrase table
			observed_durations: Duration names seen on the channel during analysis

		Returns:
			The channel's patch and playback units
		"""

		phrases = self.select_phrases(channel, table)
		playback = ChannelPlayback(channel=channel, patch=self.choose_patch())

		if not phrases:
			return playback

		pool = self.duration_pool(channel, observed_durations)

		for n, phrase in enumerate(phrases, start=1):

			logger.info(f"{n}\t{channel}\t{phrase}\t{midi_ngram.naming.name_phrase(phrase, midi_ngram.naming.name_pitch)}")

			for token in phrase.split():
				pitches = tuple(int(value) for value in token.split(","))
				playback.units.append(PlaybackUnit(pitches=pitches, duration=self.rng.choice(pool)))

			if self.config.pause_duration:
				playback.units.append(PlaybackUnit(pitches=(), duration=self.config.pause_duration))

		return playback


	def compose (
		self,
		phrases: typing.Dict[int, midi_ngram.phrases.PhraseTable],
		observed_durations: typing.Dict[int, typing.Set[str]],
		ticks_per_quarter: int
	) -> PlaybackScore:

		"""
		Build one stream per channel, in channel order.
		"""

		logger.info(f"{self.mode.capitalize()} playback:\tN\tChan\tPhrase")

		score = PlaybackScore(bpm=self.config.bpm, ticks_per_quarter=ticks_per_quarter)

		for channel in sorted(phrases):
			score.tracks.append(self.compose_channel(channel, phrases[channel], observed_durations.get(channel, set())))

		return score
