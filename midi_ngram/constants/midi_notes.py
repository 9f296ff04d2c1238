"""MIDI note names.

Maps every MIDI note number (0–127) to its note name. Convention: **C4 = 60** (Middle C),
matching the MIDI Manufacturers Association standard and most DAWs (Ableton, Logic, Reaper).

Notes are named ``<Pitch><Octave>`` with sharps for the black keys::

    import midi_ngram.constants.midi_notes as notes

    notes.MIDI_NOTE_NAMES[60]    # "C4"
    notes.MIDI_NOTE_NAMES[61]    # "C#4"
    notes.MIDI_NOTE_NAMES[0]     # "C-1"

Range: C-1 (0) through G9 (127).
"""

import typing


PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

# MIDI note 0 sits in octave -1 when C4 = 60.
LOWEST_OCTAVE = -1

MIN_NOTE = 0
MAX_NOTE = 127

MIDI_NOTE_NAMES: typing.List[str] = [
	f"{PC_TO_NOTE_NAME[number % 12]}{number // 12 + LOWEST_OCTAVE}"
	for number in range(MIN_NOTE, MAX_NOTE + 1)
]
