"""Note and duration names for tokens and phrases.

Durations are matched by their length in quarter notes against the named table
in ``midi_ngram.constants.durations``::

    name_duration(96, 96)     # "qn"
    name_duration(144, 96)    # "dqn"
    name_duration(7, 96)      # "d7"  (no standard match; raw ticks kept)

Pitches use C4 = 60::

    name_pitch(60)            # "C4"
    name_token("60,64", name_pitch)   # "C4,E4"
"""

import re
import typing

import midi_ngram.constants.durations
import midi_ngram.constants.midi_notes


# Equivalent to matching the quarter-note value rounded to 4 decimal places.
DURATION_TOLERANCE = 0.00005

_TICKS_NAME = re.compile(r"^" + midi_ngram.constants.durations.TICKS_PREFIX + r"(\d+)$")


def name_duration (ticks: int, ticks_per_quarter: int) -> str:

	"""Name a duration given in ticks.

	Parameters:
		ticks: Duration in ticks
		ticks_per_quarter: Resolution of the file the duration came from

	Returns:
		The standard duration name, or ``d<ticks>`` when there is no match
	"""

	if ticks_per_quarter <= 0:
		raise ValueError("Ticks per quarter note must be positive")

	quarters = ticks / ticks_per_quarter

	for name, value in midi_ngram.constants.durations.NAMED_DURATIONS.items():
		if abs(quarters - value) < DURATION_TOLERANCE:
			return name

	return f"{midi_ngram.constants.durations.TICKS_PREFIX}{ticks}"


def name_pitch (number: int) -> str:

	"""
	Name a MIDI note number, e.g. 60 -> "C4".
	"""

	if not midi_ngram.constants.midi_notes.MIN_NOTE <= number <= midi_ngram.constants.midi_notes.MAX_NOTE:
		raise ValueError(f"MIDI note number out of range: {number}")

	return midi_ngram.constants.midi_notes.MIDI_NOTE_NAMES[number]


def name_token (token: str, namer: typing.Callable[[int], str]) -> str:

	"""
	Name every comma separated value of a chord token.
	"""

	return ",".join(namer(int(value)) for value in token.split(","))


def name_phrase (phrase: str, namer: typing.Callable[[int], str]) -> str:

	"""
	Name every token of a space separated phrase.
	"""

	return " ".join(name_token(token, namer) for token in phrase.split())


def duration_namer (ticks_per_quarter: int) -> typing.Callable[[int], str]:

	"""
	Return a single-argument duration namer bound to a resolution.
	"""

	def namer (ticks: int) -> str:
		return name_duration(ticks, ticks_per_quarter)

	return namer


def is_duration_name (name: str) -> bool:

	"""
	Return True for a standard duration name or a ``d<ticks>`` label.
	"""

	if name in midi_ngram.constants.durations.NAMED_DURATIONS:
		return True

	return _TICKS_NAME.match(name) is not None


def duration_to_ticks (name: str, ticks_per_quarter: int) -> int:

	"""
	Convert a duration name back to ticks at the given resolution.
	"""

	if name in midi_ngram.constants.durations.NAMED_DURATIONS:
		return int(round(midi_ngram.constants.durations.NAMED_DURATIONS[name] * ticks_per_quarter))

	match = _TICKS_NAME.match(name)

	if match is None:
		raise ValueError(f"Unknown duration name: {name}")

	return int(match.group(1))
