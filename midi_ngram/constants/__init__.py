"""Constants for midi_ngram.

- ``midi_ngram.constants.durations`` - Named note durations, in quarter notes
- ``midi_ngram.constants.midi_notes`` - Note names for every MIDI note number, C4 = 60 (Middle C)
- ``midi_ngram.constants.velocity`` - MIDI velocity constants
"""

# MIDI reserves channel 10 (index 9) for percussion; it is never analyzed.
PERCUSSION_CHANNEL = 9

MIDI_CHANNELS = 16

# General MIDI patch 0 (Acoustic Grand Piano), used when no patch is chosen.
DEFAULT_PATCH = 0
