import pathlib
import typing

import mido
import pytest


# (channel, start_tick, pitch, duration_ticks)
NoteSpec = typing.Tuple[int, int, int, int]


def build_midi_file (notes: typing.Sequence[NoteSpec], ticks_per_beat: int = 96) -> mido.MidiFile:

	"""Build a single-track MIDI file containing the given notes."""

	messages: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for channel, start, pitch, duration in notes:
		# Sort note offs before note ons at the same tick.
		messages.append((start, 1, mido.Message('note_on', channel=channel, note=pitch, velocity=100)))
		messages.append((start + duration, 0, mido.Message('note_off', channel=channel, note=pitch, velocity=0)))

	messages.sort(key=lambda m: (m[0], m[1]))

	mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
	track = mido.MidiTrack()
	mid.tracks.append(track)

	last = 0

	for tick, _, message in messages:
		track.append(message.copy(time=tick - last))
		last = tick

	return mid


def melody (channel: int, pitches: typing.Sequence[int], duration: int = 96) -> typing.List[NoteSpec]:

	"""Lay out a monophonic line of equal-length notes."""

	return [(channel, i * duration, pitch, duration) for i, pitch in enumerate(pitches)]


@pytest.fixture
def write_midi (tmp_path: pathlib.Path) -> typing.Callable[..., str]:

	"""Return a helper that saves notes to a MIDI file under tmp_path and returns its path."""

	counter = {"n": 0}

	def _write (notes: typing.Sequence[NoteSpec], ticks_per_beat: int = 96) -> str:

		counter["n"] += 1
		path = tmp_path / f"input_{counter['n']}.mid"
		build_midi_file(notes, ticks_per_beat=ticks_per_beat).save(str(path))
		return str(path)

	return _write
