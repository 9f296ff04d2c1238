import dataclasses
import logging
import typing

import mido

import midi_ngram.constants
import midi_ngram.constants.velocity
import midi_ngram.events
import midi_ngram.naming
import midi_ngram.playback


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class MidiSource:

	"""
	The note events of one MIDI file and the file's resolution.
	"""

	path: str
	ticks_per_quarter: int
	events: typing.List[midi_ngram.events.NoteEvent]


def extract_note_events (mid: mido.MidiFile) -> typing.List[midi_ngram.events.NoteEvent]:

	"""Pair note on/off messages into note events.

	Every track is read on its own absolute tick timeline. A note_on with
	velocity 0 ends a note. Percussion (channel 9) and notes that never end are
	dropped.
	"""

	events: typing.List[midi_ngram.events.NoteEvent] = []

	for track in mid.tracks:

		abs_tick = 0
		# (channel, pitch) -> onset ticks, oldest first
		pending: typing.Dict[typing.Tuple[int, int], typing.List[int]] = {}

		for msg in track:

			abs_tick += msg.time

			if msg.type not in ("note_on", "note_off"):
				continue

			if msg.channel == midi_ngram.constants.PERCUSSION_CHANNEL:
				continue

			key = (msg.channel, msg.note)

			if msg.type == "note_on" and msg.velocity > 0:
				pending.setdefault(key, []).append(abs_tick)
				continue

			starts = pending.get(key)

			if not starts:
				continue

			# The oldest sounding note of this pitch ends first.
			onset = starts.pop(0)

			events.append(
				midi_ngram.events.NoteEvent(
					channel = msg.channel,
					start_tick = onset,
					pitch = msg.note,
					duration_ticks = abs_tick - onset
				)
			)

	events.sort(key=lambda e: (e.start_tick, e.channel, e.pitch))

	return events


def read_midi_file (path: str) -> MidiSource:

	"""
	Read a MIDI file into note events.
	"""

	mid = mido.MidiFile(path)
	events = extract_note_events(mid)

	logger.info(f"Read {len(events)} notes from {path} ({mid.ticks_per_beat} ticks per quarter note)")

	return MidiSource(path=str(path), ticks_per_quarter=mid.ticks_per_beat, events=events)


def score_to_midi (score: midi_ngram.playback.PlaybackScore, velocity: int = midi_ngram.constants.velocity.DEFAULT_VELOCITY) -> mido.MidiFile:

	"""Render a playback score as a type 1 MIDI file.

	The first track carries the tempo. Each channel stream gets its own track
	starting at tick 0 with a program change to its patch; chord notes start
	together and rests advance time.
	"""

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = score.ticks_per_quarter

	tempo_track = mido.MidiTrack()
	tempo_track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(score.bpm), time=0))
	mid.tracks.append(tempo_track)

	for playback in score.tracks:

		track = mido.MidiTrack()
		track.append(mido.Message('program_change', channel=playback.channel, program=playback.patch, time=0))

		delta = 0

		for unit in playback.units:

			ticks = midi_ngram.naming.duration_to_ticks(unit.duration, score.ticks_per_quarter)

			if unit.is_rest:
				delta += ticks
				continue

			for i, pitch in enumerate(unit.pitches):
				track.append(mido.Message('note_on', channel=playback.channel, note=pitch, velocity=velocity, time=delta if i == 0 else 0))

			for i, pitch in enumerate(unit.pitches):
				track.append(mido.Message('note_off', channel=playback.channel, note=pitch, velocity=0, time=ticks if i == 0 else 0))

			delta = 0

		track.append(mido.MetaMessage('end_of_track', time=delta))
		mid.tracks.append(track)

	return mid


def write_score (score: midi_ngram.playback.PlaybackScore, filename: str) -> None:

	"""
	Save a playback score to a MIDI file.
	"""

	mid = score_to_midi(score)
	mid.save(filename)

	logger.info(f"Saved {filename}")
