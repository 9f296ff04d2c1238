"""Named note durations.

All values are in **quarter notes**, where 1.0 = one quarter note. Names use the
compact convention common to MIDI score tools::

    wn  whole          hn  half          qn  quarter
    en  eighth         sn  sixteenth     xn  thirty-second
    yn  sixty-fourth

A ``d`` prefix dots the value (x 1.5), ``dd`` double-dots it (x 1.75) and a ``t``
prefix makes it a triplet (x 2/3)::

    import midi_ngram.constants.durations as dur

    dur.NAMED_DURATIONS["dqn"]   # 1.5
    dur.NAMED_DURATIONS["ten"]   # 1/3

Durations that match none of these are written as ``d<ticks>`` (e.g. ``d7``),
a raw tick count in the source file's resolution.
"""

import typing


WHOLE = 4.0
HALF = 2.0
QUARTER = 1.0
EIGHTH = 0.5
SIXTEENTH = 0.25
THIRTYSECOND = 0.125
SIXTYFOURTH = 0.0625

DOTTED = 1.5
DOUBLE_DOTTED = 1.75
TRIPLET = 2 / 3


_BASE_DURATIONS: typing.List[typing.Tuple[str, float]] = [
	("wn", WHOLE),
	("hn", HALF),
	("qn", QUARTER),
	("en", EIGHTH),
	("sn", SIXTEENTH),
	("xn", THIRTYSECOND),
	("yn", SIXTYFOURTH),
]


NAMED_DURATIONS: typing.Dict[str, float] = {}

for _name, _value in _BASE_DURATIONS:
	NAMED_DURATIONS[_name] = _value
	NAMED_DURATIONS["d" + _name] = _value * DOTTED
	NAMED_DURATIONS["dd" + _name] = _value * DOUBLE_DOTTED
	NAMED_DURATIONS["t" + _name] = _value * TRIPLET

# Raw tick counts are written as "d" followed by digits.
TICKS_PREFIX = "d"
