"""
midi_ngram - find the most repeated phrases in MIDI files and play them back.

Each channel of each input file is reduced to a sequence of chord tokens (the
pitches, and separately the durations, that start together), then:

- **Phrase tables.** Every run of ``ngram_size`` consecutive tokens is counted
  with an overlapping window. The most repeated phrases are kept per channel,
  ranked by count and then by phrase.
- **Transition networks.** The same tokens, cut into non-overlapping groups,
  record which phrase follows which.
- **Resynthesis.** Phrases are played back in rank order, shuffled, or drawn
  at random weighted by how often they repeat, and written to a new MIDI file.

Minimal example:

    ```python
    import random

    import midi_ngram

    config = midi_ngram.NgramConfig(in_files=["twinkle.mid"], ngram_size=3, weight=True)
    session = midi_ngram.NgramSession(config, rng=random.Random(42))

    session.process()
    print(session.phrases)       # {0: {"60 60 67": 2, ...}}
    print(session.network)       # {0: {"60 60 67-67 69 69": 1, ...}}

    session.write()
    ```

Package-level exports: ``NgramConfig``, ``NgramSession``, ``ConfigurationError``,
``SamplingError``, ``load_config``.
"""

import midi_ngram.config
import midi_ngram.errors
import midi_ngram.session


NgramConfig = midi_ngram.config.NgramConfig
NgramSession = midi_ngram.session.NgramSession
ConfigurationError = midi_ngram.errors.ConfigurationError
SamplingError = midi_ngram.errors.SamplingError
load_config = midi_ngram.config.load_config
