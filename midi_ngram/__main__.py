import logging
import os

import midi_ngram.config
import midi_ngram.session


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main () -> None:

	"""
	Analyze the files named in the config file and write the resynthesized score.
	"""

	config_path = os.environ.get("MIDI_NGRAM_CONFIG", midi_ngram.config.DEFAULT_CONFIG_PATH)

	logger.info("midi_ngram starting...")

	config = midi_ngram.config.load_config(config_path)

	session = midi_ngram.session.NgramSession(config)
	session.process()
	session.write()


if __name__ == "__main__":
	main()
