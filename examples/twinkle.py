import logging
import random

import midi_ngram


logging.basicConfig(level=logging.INFO)


# Analyze three-note phrases in every non-percussion channel, then play the
# ten most repeated ones back in order, with a quarter note rest between them.

config = midi_ngram.NgramConfig(
	in_files = ["twinkle_twinkle.mid"],
	ngram_size = 3,
	max_phrases = 10,
	bpm = 90,
	durations = ["qn", "en"],
	pause_duration = "qn",
	out_file = "twinkle-ngram.mid",
)

session = midi_ngram.NgramSession(config, rng=random.Random(7))
session.process()

for channel, network in session.network.items():
	for edge, count in sorted(network.items(), key=lambda item: -item[1])[:5]:
		print(f"{channel}\t{count}\t{edge}")

session.write()
