import logging
import random
import typing

import midi_ngram.config
import midi_ngram.errors
import midi_ngram.events
import midi_ngram.midi_io
import midi_ngram.naming
import midi_ngram.phrases
import midi_ngram.playback
import midi_ngram.transition_network


logger = logging.getLogger(__name__)


class NgramSession:

	"""
	Owns the phrase tables and transition networks built from one set of input files.

	Typical use::

		session = NgramSession(NgramConfig(in_files=["twinkle.mid"], ngram_size=3))
		session.process()
		score = session.compose()
		session.write(score)

	After ``process()`` the analysis is available, keyed by channel:

	- ``phrases`` - pitch phrase -> count
	- ``duration_phrases`` - named duration phrase (e.g. ``"qn en"``) -> count
	- ``network`` / ``duration_network`` - ``"<previous>-<current>"`` -> count
	- ``durations_seen`` - the duration names seen on each channel
	"""

	def __init__ (
		self,
		config: midi_ngram.config.NgramConfig,
		rng: typing.Optional[random.Random] = None,
		reader: typing.Callable[[str], midi_ngram.midi_io.MidiSource] = midi_ngram.midi_io.read_midi_file
	) -> None:

		"""Initialize an empty session.

		Parameters:
			config: Validated options
			rng: Random source for sampling, shuffling and patch choice. Pass a
				seeded ``random.Random`` for repeatable output.
			reader: Loads one input file
		"""

		self.config = config
		self.rng = rng or random.Random()
		self.reader = reader

		self.ticks_per_quarter: typing.Optional[int] = None
		self.phrases: typing.Dict[int, midi_ngram.phrases.PhraseTable] = {}
		self.duration_phrases: typing.Dict[int, midi_ngram.phrases.PhraseTable] = {}
		self.durations_seen: typing.Dict[int, typing.Set[str]] = {}
		self._networks: typing.Dict[int, midi_ngram.transition_network.PhraseGraph] = {}
		self._duration_networks: typing.Dict[int, midi_ngram.transition_network.PhraseGraph] = {}
		self.processed = False


	def reset (self) -> None:

		"""
		Discard every table built by a previous analysis.
		"""

		self.ticks_per_quarter = None
		self.phrases.clear()
		self.duration_phrases.clear()
		self.durations_seen.clear()
		self._networks.clear()
		self._duration_networks.clear()
		self.processed = False


	@property
	def network (self) -> typing.Dict[int, typing.Dict[str, int]]:

		return {channel: midi_ngram.transition_network.edge_map(graph) for channel, graph in sorted(self._networks.items())}


	@property
	def duration_network (self) -> typing.Dict[int, typing.Dict[str, int]]:

		return {channel: midi_ngram.transition_network.edge_map(graph) for channel, graph in sorted(self._duration_networks.items())}


	def process (self) -> None:

		"""
		Read every input file in order and analyze it, replacing any earlier results.
		"""

		self.reset()

		for path in self.config.in_files:
			logger.info(f"Processing {path}")
			source = self.reader(path)
			self.analyze_events(source.events, source.ticks_per_quarter)

		self.processed = True


	def analyze_events (self, events: typing.Iterable[midi_ngram.events.NoteEvent], ticks_per_quarter: int) -> None:

		"""Analyze the note events of one file, accumulating into the session tables.

		The first file's resolution is used to name durations for every later file.
		"""

		if self.ticks_per_quarter is None:
			self.ticks_per_quarter = ticks_per_quarter

		elif ticks_per_quarter != self.ticks_per_quarter:
			logger.warning(
				f"File resolution {ticks_per_quarter} differs from {self.ticks_per_quarter}; "
				f"durations are named using {self.ticks_per_quarter}"
			)

		grouped = midi_ngram.events.group_events(
			events,
			channels = self.config.analyze,
			merge_channels = self.config.one_channel
		)

		for channel, tokens in grouped.items():
			self._analyze_channel(channel, tokens)

		self.processed = True


	def _analyze_channel (self, channel: int, tokens: midi_ngram.events.ChannelTokens) -> None:

		"""
		Count, rank and merge one channel's pitch and duration phrases and extend its networks.
		"""

		size = self.config.ngram_size
		name_durations = midi_ngram.naming.duration_namer(self.ticks_per_quarter)

		def convert_durations (phrase: str) -> str:
			return midi_ngram.naming.name_phrase(phrase, name_durations)

		seen = self.durations_seen.setdefault(channel, set())

		for token in tokens.durations:
			seen.update(name_durations(int(ticks)) for ticks in token.split(","))

		if len(tokens) < size:
			logger.debug(f"Channel {channel}: {len(tokens)} tokens is fewer than the phrase size {size}")

		for label, sequence, table, convert in (
			("Pitch", tokens.pitches, self.phrases.setdefault(channel, {}), None),
			("Duration", tokens.durations, self.duration_phrases.setdefault(channel, {}), convert_durations),
		):

			ranked = midi_ngram.phrases.rank_phrases(
				midi_ngram.phrases.count_phrases(sequence, size),
				size = size,
				max_phrases = self.config.max_phrases,
				keep_singletons = self.config.single_phrases
			)

			logger.info(f"{label} ngram analysis, channel {channel}:\tNum\tReps\tPhrase")

			for n, (phrase, count) in enumerate(ranked, start=1):
				text = convert(phrase) if convert is not None else midi_ngram.naming.name_phrase(phrase, midi_ngram.naming.name_pitch)
				logger.info(f"\t{n}\t{count}\t{phrase}\t{text}")

			midi_ngram.phrases.merge_phrases(table, ranked, convert)

		midi_ngram.transition_network.build_network(
			tokens.pitches,
			size,
			self._networks.setdefault(channel, midi_ngram.transition_network.PhraseGraph())
		)

		midi_ngram.transition_network.build_network(
			tokens.durations,
			size,
			self._duration_networks.setdefault(channel, midi_ngram.transition_network.PhraseGraph()),
			convert = convert_durations
		)


	def compose (self) -> midi_ngram.playback.PlaybackScore:

		"""
		Build the playback score from the analyzed pitch phrases.
		"""

		if not self.processed or self.ticks_per_quarter is None:
			raise midi_ngram.errors.SamplingError("Nothing has been analyzed; call process() first")

		composer = midi_ngram.playback.PlaybackComposer(self.config, rng=self.rng)

		# Channels whose phrases were all filtered out have nothing to play.
		phrases: typing.Dict[int, midi_ngram.phrases.PhraseTable] = {}

		for channel, table in self.phrases.items():

			if not table:
				logger.debug(f"Channel {channel}: no phrases to play, skipped")
				continue

			phrases[channel] = table

		if self.config.weight and not phrases:
			raise midi_ngram.errors.SamplingError("No channel has phrases to sample from")

		return composer.compose(phrases, self.durations_seen, self.ticks_per_quarter)


	def write (self, score: typing.Optional[midi_ngram.playback.PlaybackScore] = None) -> None:

		"""
		Write a playback score (composed now if not given) to the configured output file.
		"""

		if score is None:
			score = self.compose()

		midi_ngram.midi_io.write_score(score, self.config.out_file)
