import pytest

import midi_ngram.constants.durations
import midi_ngram.naming


def test_quarter_note_is_named () -> None:

	"""A duration equal to the resolution is a quarter note."""

	assert midi_ngram.naming.name_duration(96, 96) == "qn"


def test_unmatched_duration_keeps_ticks () -> None:

	"""A duration with no standard match is labelled with its tick count."""

	name = midi_ngram.naming.name_duration(7, 96)

	assert name == "d7"
	assert name not in midi_ngram.constants.durations.NAMED_DURATIONS


@pytest.mark.parametrize("ticks, name", [
	(384, "wn"),
	(192, "hn"),
	(288, "dhn"),
	(144, "dqn"),
	(168, "ddqn"),
	(48, "en"),
	(32, "ten"),
	(64, "tqn"),
	(24, "sn"),
	(16, "tsn"),
	(12, "xn"),
])
def test_standard_durations (ticks: int, name: str) -> None:

	"""Standard note values at 96 ticks per quarter note."""

	assert midi_ngram.naming.name_duration(ticks, 96) == name


def test_triplet_matches_within_tolerance () -> None:

	"""A triplet eighth at 480 ticks per quarter note (160 ticks) is matched."""

	assert midi_ngram.naming.name_duration(160, 480) == "ten"
	assert midi_ngram.naming.name_duration(161, 480) == "d161"


def test_invalid_resolution () -> None:

	"""Resolution must be positive."""

	with pytest.raises(ValueError):
		midi_ngram.naming.name_duration(96, 0)


def test_pitch_names () -> None:

	"""MIDI note numbers name with C4 = 60 and sharps."""

	assert midi_ngram.naming.name_pitch(60) == "C4"
	assert midi_ngram.naming.name_pitch(61) == "C#4"
	assert midi_ngram.naming.name_pitch(69) == "A4"
	assert midi_ngram.naming.name_pitch(0) == "C-1"
	assert midi_ngram.naming.name_pitch(127) == "G9"


def test_every_pitch_has_a_unique_name () -> None:

	"""The pitch lookup is total and one-to-one over 0-127."""

	names = [midi_ngram.naming.name_pitch(n) for n in range(128)]

	assert len(set(names)) == 128


@pytest.mark.parametrize("number", [-1, 128])
def test_pitch_out_of_range (number: int) -> None:

	"""Numbers outside 0-127 are rejected."""

	with pytest.raises(ValueError):
		midi_ngram.naming.name_pitch(number)


def test_chord_tokens_and_phrases () -> None:

	"""Names apply element-wise and keep the separators."""

	assert midi_ngram.naming.name_token("60,64,67", midi_ngram.naming.name_pitch) == "C4,E4,G4"

	namer = midi_ngram.naming.duration_namer(96)

	assert midi_ngram.naming.name_phrase("96,192 48 7", namer) == "qn,hn en d7"


def test_duration_names_round_trip_to_ticks () -> None:

	"""Standard names and tick labels convert back to ticks."""

	assert midi_ngram.naming.duration_to_ticks("qn", 480) == 480
	assert midi_ngram.naming.duration_to_ticks("ten", 480) == 160
	assert midi_ngram.naming.duration_to_ticks("d7", 96) == 7

	with pytest.raises(ValueError):
		midi_ngram.naming.duration_to_ticks("quarter", 96)


def test_is_duration_name () -> None:

	"""Standard names and tick labels are recognised."""

	assert midi_ngram.naming.is_duration_name("qn")
	assert midi_ngram.naming.is_duration_name("d96")
	assert not midi_ngram.naming.is_duration_name("d")
	assert not midi_ngram.naming.is_duration_name("QN")
	assert not midi_ngram.naming.is_duration_name("")
