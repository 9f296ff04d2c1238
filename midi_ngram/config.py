"""Analysis and playback configuration.

All options are validated once, when the configuration is built. The first
invalid option raises ``midi_ngram.errors.ConfigurationError``::

    config = NgramConfig(in_files=["twinkle.mid"], ngram_size=3, weight=True)

Configurations can also be read from YAML::

    # midi-ngram.yaml
    in_files:
      - twinkle.mid
    ngram_size: 3
    max_phrases: 0
    durations: [qn, en]
    pause_duration: hn

    config = load_config("midi-ngram.yaml")
"""

import dataclasses
import logging
import os
import typing

import yaml

import midi_ngram.constants
import midi_ngram.errors
import midi_ngram.naming
import midi_ngram.phrases


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "midi-ngram.yaml"


def _default_patches () -> typing.List[int]:

	return list(range(128))


@dataclasses.dataclass
class NgramConfig:

	"""Options for one analysis session.

	Parameters:
		in_files: MIDI files to analyze, in order (required, non-empty)
		ngram_size: Tokens per phrase
		max_phrases: Phrases kept per channel per file (0 = unlimited)
		bpm: Tempo of the resynthesized score
		durations: Duration names to choose from at random when playing. When
			empty, the durations observed on each channel are used instead.
		patches: Patches to choose from when ``random_patch`` is set
		out_file: MIDI file written by ``NgramSession.write``
		pause_duration: Rest inserted after every phrase ("" = no rest)
		analyze: Channels to analyze (empty = every non-percussion channel)
		loop: Number of phrases drawn in weighted playback
		weight: Draw phrases at random, weighted by repetition count
		random_patch: Choose one random patch from ``patches`` per channel
		shuffle_phrases: Play phrases in random order (ignored when ``weight`` is set)
		single_phrases: Keep phrases that occur only once
		one_channel: Analyze every channel as though it were channel 0
	"""

	in_files: typing.List[str]
	ngram_size: int = 2
	max_phrases: int = 10
	bpm: int = 100
	durations: typing.List[str] = dataclasses.field(default_factory=list)
	patches: typing.List[int] = dataclasses.field(default_factory=_default_patches)
	out_file: str = "midi-ngram.mid"
	pause_duration: str = ""
	analyze: typing.List[int] = dataclasses.field(default_factory=list)
	loop: int = 10
	weight: bool = False
	random_patch: bool = False
	shuffle_phrases: bool = False
	single_phrases: bool = False
	one_channel: bool = False


	def __post_init__ (self) -> None:

		"""
		Validate every option, raising on the first violation.
		"""

		if not isinstance(self.in_files, list) or not self.in_files:
			raise midi_ngram.errors.ConfigurationError("in_files must be a non-empty list")

		for path in self.in_files:
			if not isinstance(path, (str, os.PathLike)) or not str(path):
				raise midi_ngram.errors.ConfigurationError(f"Invalid input file: {path!r}")

		midi_ngram.phrases.validate_phrase_size(self.ngram_size)

		_check_int("max_phrases", self.max_phrases, minimum=0)
		_check_int("bpm", self.bpm, minimum=1)
		_check_int("loop", self.loop, minimum=1)

		_check_list("durations", self.durations)

		for name in self.durations:
			if not isinstance(name, str) or not midi_ngram.naming.is_duration_name(name):
				raise midi_ngram.errors.ConfigurationError(f"Invalid duration: {name!r}")

		_check_list("patches", self.patches)

		if self.random_patch and not self.patches:
			raise midi_ngram.errors.ConfigurationError("patches cannot be empty when random_patch is set")

		for patch in self.patches:
			_check_int("patch", patch, minimum=0, maximum=127)

		if not isinstance(self.out_file, (str, os.PathLike)) or not str(self.out_file):
			raise midi_ngram.errors.ConfigurationError("out_file must be a non-empty path")

		if not isinstance(self.pause_duration, str):
			raise midi_ngram.errors.ConfigurationError("pause_duration must be a string")

		if self.pause_duration and not midi_ngram.naming.is_duration_name(self.pause_duration):
			raise midi_ngram.errors.ConfigurationError(f"Invalid pause duration: {self.pause_duration!r}")

		_check_list("analyze", self.analyze)

		for channel in self.analyze:
			_check_int("channel", channel, minimum=0, maximum=midi_ngram.constants.MIDI_CHANNELS - 1)

		for name in ("weight", "random_patch", "shuffle_phrases", "single_phrases", "one_channel"):
			if not isinstance(getattr(self, name), bool):
				raise midi_ngram.errors.ConfigurationError(f"{name} must be a boolean")


def _check_int (name: str, value: typing.Any, minimum: int, maximum: typing.Optional[int] = None) -> None:

	"""
	Raise ConfigurationError unless value is an integer within range.
	"""

	if isinstance(value, bool) or not isinstance(value, int):
		raise midi_ngram.errors.ConfigurationError(f"{name} must be an integer, got {value!r}")

	if value < minimum or (maximum is not None and value > maximum):
		raise midi_ngram.errors.ConfigurationError(f"{name} out of range: {value}")


def _check_list (name: str, value: typing.Any) -> None:

	if not isinstance(value, list):
		raise midi_ngram.errors.ConfigurationError(f"{name} must be a list, got {type(value).__name__}")


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> NgramConfig:

	"""
	Load configuration from a YAML file.
	"""

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f) or {}

	if not isinstance(data, dict):
		raise midi_ngram.errors.ConfigurationError(f"Config file {config_path} must contain a mapping")

	known = {field.name for field in dataclasses.fields(NgramConfig)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise midi_ngram.errors.ConfigurationError(f"Unknown options in {config_path}: {', '.join(unknown)}")

	if "in_files" not in data:
		raise midi_ngram.errors.ConfigurationError("in_files is required")

	logger.info(f"Loaded config from {config_path}")

	return NgramConfig(**data)
