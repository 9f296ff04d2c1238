"""Transition networks between successive phrase groups.

Unlike phrase counting, which slides an overlapping window one token at a time,
the network cuts a token sequence into consecutive, non-overlapping groups of
``size`` tokens and links each group to the one that follows it::

    tokens = ["60", "62", "64", "60", "62", "64", "65"]

    phrase_groups(tokens, 2)   # ["60 62", "64 60", "62 64"]  ("65" is dropped)

    graph = WeightedGraph()
    build_network(tokens, 2, graph)
    edge_map(graph)            # {"60 62-64 60": 1, "64 60-62 64": 1}

Edge keys join two phrases with ``-``. Phrases are built from digits, commas,
spaces and duration names, none of which contain ``-``, so keys split back
unambiguously; a phrase namer that introduced ``-`` would break that.
"""

import typing

import midi_ngram.phrases
import midi_ngram.weighted_graph


EDGE_SEPARATOR = "-"

PhraseGraph = midi_ngram.weighted_graph.WeightedGraph[str]


def phrase_groups (tokens: typing.Sequence[str], size: int) -> typing.List[str]:

	"""
	Split tokens into complete, non-overlapping phrases of ``size`` tokens.
	"""

	midi_ngram.phrases.validate_phrase_size(size)

	complete = len(tokens) - len(tokens) % size

	return [" ".join(tokens[i:i + size]) for i in range(0, complete, size)]


def build_network (
	tokens: typing.Sequence[str],
	size: int,
	graph: PhraseGraph,
	convert: typing.Optional[typing.Callable[[str], str]] = None
) -> int:

	"""Add the transitions between successive phrase groups to graph.

	Parameters:
		tokens: One channel's tokens from one file
		size: Tokens per group
		graph: Network to accumulate into
		convert: Optional renaming applied to each group before it becomes a node

	Returns:
		The number of transitions added
	"""

	groups = phrase_groups(tokens, size)

	if convert is not None:
		groups = [convert(group) for group in groups]

	for previous, current in zip(groups, groups[1:]):
		graph.add_transition(previous, current)

	return max(0, len(groups) - 1)


def edge_key (source: str, target: str) -> str:

	"""
	Return the string key for an edge.
	"""

	return f"{source}{EDGE_SEPARATOR}{target}"


def edge_map (graph: PhraseGraph) -> typing.Dict[str, int]:

	"""
	Render a network as a mapping of ``"<previous>-<current>"`` keys to counts.
	"""

	return {edge_key(source, target): weight for source, target, weight in graph.edges()}
