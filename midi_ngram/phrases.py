"""Sliding-window phrase counting and ranking.

Tokens are encoded by ``midi_ngram.symbol_codec`` so that each chord token is a
single whitespace separated word, counted with overlapping windows of ``size``
words, then decoded back to their numeric form::

    counts = count_phrases(["60", "62", "60", "62"], size=2)
    # {"60 62": 2, "62 60": 1}

    rank_phrases(counts, size=2)
    # [("60 62", 2)]

A sequence of T tokens yields exactly T - size + 1 windows (none if T < size).
"""

import typing

import midi_ngram.errors
import midi_ngram.symbol_codec


PhraseTable = typing.Dict[str, int]


def validate_phrase_size (size: typing.Any) -> int:

	"""
	Return size if it is a positive integer, otherwise raise ConfigurationError.
	"""

	if isinstance(size, bool) or not isinstance(size, int) or size < 1:
		raise midi_ngram.errors.ConfigurationError(f"Phrase size must be a positive integer, got {size!r}")

	return size


def ngrams (text: str, size: int) -> PhraseTable:

	"""
	Count every run of ``size`` consecutive whitespace separated words in text.
	"""

	validate_phrase_size(size)

	words = text.split()
	counts: PhraseTable = {}

	for i in range(len(words) - size + 1):
		phrase = " ".join(words[i:i + size])
		counts[phrase] = counts.get(phrase, 0) + 1

	return counts


def count_phrases (tokens: typing.Sequence[str], size: int) -> PhraseTable:

	"""
	Count overlapping phrases of ``size`` tokens, keyed by decoded phrase.
	"""

	text = midi_ngram.symbol_codec.encode_sequence(tokens)

	return {
		midi_ngram.symbol_codec.decode_phrase(phrase): count
		for phrase, count in ngrams(text, size).items()
	}


def sort_key (item: typing.Tuple[str, int]) -> typing.Tuple[int, str]:

	"""
	Order phrases by count descending, then by phrase ascending.
	"""

	phrase, count = item

	return (-count, phrase)


def rank_phrases (
	counts: PhraseTable,
	size: int,
	max_phrases: int = 0,
	keep_singletons: bool = False
) -> typing.List[typing.Tuple[str, int]]:

	"""Filter, rank and truncate counted phrases.

	Parameters:
		counts: Decoded phrase counts from ``count_phrases``
		size: Phrase size; phrases with any other number of tokens are dropped
		max_phrases: Keep at most this many phrases (0 keeps all)
		keep_singletons: Keep phrases that occur only once

	Returns:
		``(phrase, count)`` pairs, most repeated first
	"""

	ranked: typing.List[typing.Tuple[str, int]] = []

	for phrase, count in sorted(counts.items(), key=sort_key):

		if len(phrase.split()) != size:
			continue

		if not keep_singletons and count == 1:
			continue

		ranked.append((phrase, count))

		if max_phrases > 0 and len(ranked) >= max_phrases:
			break

	return ranked


def merge_phrases (
	table: PhraseTable,
	ranked: typing.Iterable[typing.Tuple[str, int]],
	convert: typing.Optional[typing.Callable[[str], str]] = None
) -> None:

	"""
	Add ranked phrase counts into table, renaming each phrase with convert if given.
	"""

	for phrase, count in ranked:

		key = convert(phrase) if convert is not None else phrase
		table[key] = table.get(key, 0) + count


def ranked_table (table: PhraseTable) -> typing.List[typing.Tuple[str, int]]:

	"""
	Return every entry of an accumulated table in rank order.
	"""

	return sorted(table.items(), key=sort_key)
