import random
import typing


OptionType = typing.TypeVar("OptionType")


def choose_weighted (options: typing.Sequence[typing.Tuple[OptionType, int]], rng: random.Random) -> OptionType:

	"""
	Choose one item from a list of weighted options.
	"""

	if not options:
		raise ValueError("Options cannot be empty")

	total_weight = 0

	for _, weight in options:
		if weight <= 0:
			raise ValueError("Weights must be positive")
		total_weight += weight

	roll = rng.uniform(0, total_weight)
	accum = 0.0

	for option, weight in options:
		accum += weight
		if roll <= accum:
			return option

	return options[-1][0]


def sample_weighted (options: typing.Sequence[typing.Tuple[OptionType, int]], count: int, rng: random.Random) -> typing.List[OptionType]:

	"""
	Draw count independent weighted choices, with replacement.
	"""

	return [choose_weighted(options, rng) for _ in range(count)]
