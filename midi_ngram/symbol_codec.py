"""Alphabetic re-encoding of chord tokens.

A chord token such as ``"60,64,67"`` is made of digits and commas. The phrase
counter works on whitespace separated words, so each token is transliterated
letter for letter into a word that contains neither digits nor separators:

    encode("60,64,67")   # "gakgekgh"

The mapping is one-to-one over an 11 symbol alphabet (``0-9`` and ``,``), so
``decode(encode(token)) == token`` for every valid token.
"""

import typing


TOKEN_ALPHABET = "0123456789,"
SYMBOL_ALPHABET = "abcdefghijk"

_ENCODE_TABLE = str.maketrans(TOKEN_ALPHABET, SYMBOL_ALPHABET)
_DECODE_TABLE = str.maketrans(SYMBOL_ALPHABET, TOKEN_ALPHABET)


def _check (text: str, alphabet: str) -> None:

	"""
	Raise ValueError if text is empty or contains characters outside the alphabet.
	"""

	if not text:
		raise ValueError("Cannot encode or decode an empty token")

	invalid = set(text) - set(alphabet)

	if invalid:
		raise ValueError(f"Invalid characters {sorted(invalid)} in '{text}'")


def encode (token: str) -> str:

	"""
	Encode a digit/comma token as a single alphabetic symbol.
	"""

	_check(token, TOKEN_ALPHABET)

	return token.translate(_ENCODE_TABLE)


def decode (symbol: str) -> str:

	"""
	Decode an alphabetic symbol back to its digit/comma token.
	"""

	_check(symbol, SYMBOL_ALPHABET)

	return symbol.translate(_DECODE_TABLE)


def encode_sequence (tokens: typing.Iterable[str]) -> str:

	"""
	Encode every token and join them into whitespace separated text.
	"""

	return " ".join(encode(token) for token in tokens)


def decode_phrase (phrase: str) -> str:

	"""
	Decode a whitespace separated run of symbols, keeping single spaces between tokens.
	"""

	return " ".join(decode(symbol) for symbol in phrase.split())
