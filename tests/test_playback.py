import collections
import random

import pytest

import midi_ngram.config
import midi_ngram.errors
import midi_ngram.playback


TABLE = {"60 62": 3, "64,67 65": 2, "55 57": 2, "70 72": 1}


def _composer (seed: int = 1, **options: object) -> midi_ngram.playback.PlaybackComposer:

	"""Build a composer with a seeded random source."""

	config = midi_ngram.config.NgramConfig(in_files=["in.mid"], **options)

	return midi_ngram.playback.PlaybackComposer(config, rng=random.Random(seed))


def _phrases (playback: midi_ngram.playback.ChannelPlayback, size: int = 2) -> list:

	"""Regroup pitch units into phrase strings, ignoring rests."""

	tokens = [",".join(str(p) for p in unit.pitches) for unit in playback.units if not unit.is_rest]

	return [" ".join(tokens[i:i + size]) for i in range(0, len(tokens), size)]


def test_ordered_mode_uses_rank_order () -> None:

	"""Ordered playback emits each phrase once, most repeated first."""

	playback = _composer(durations=["qn"]).compose_channel(0, TABLE)

	assert _phrases(playback) == ["60 62", "55 57", "64,67 65", "70 72"]
	assert playback.units[2] == midi_ngram.playback.PlaybackUnit(pitches=(55,), duration="qn")
	assert playback.units[4].pitches == (64, 67)


def test_ordered_mode_ignores_random_source () -> None:

	"""Ordered phrases are the same whatever the seed."""

	first = _phrases(_composer(seed=1, durations=["qn", "en"]).compose_channel(0, TABLE))
	second = _phrases(_composer(seed=99, durations=["qn", "en"]).compose_channel(0, TABLE))

	assert first == second


def test_shuffled_mode_is_a_permutation () -> None:

	"""Shuffled playback emits every phrase exactly once."""

	playback = _composer(shuffle_phrases=True, durations=["qn"]).compose_channel(0, TABLE)

	assert sorted(_phrases(playback)) == sorted(TABLE)


def test_shuffled_mode_is_reproducible_with_seed () -> None:

	"""The same seed gives the same shuffle."""

	first = _composer(seed=5, shuffle_phrases=True, durations=["qn"]).compose_channel(0, TABLE)
	second = _composer(seed=5, shuffle_phrases=True, durations=["qn"]).compose_channel(0, TABLE)

	assert first == second


def test_weighted_mode_draws_loop_phrases_from_table () -> None:

	"""Weighted playback draws exactly loop phrases, all from the table."""

	playback = _composer(weight=True, loop=25, durations=["qn"]).compose_channel(0, TABLE)
	phrases = _phrases(playback)

	assert len(phrases) == 25
	assert set(phrases) <= set(TABLE)


def test_weighted_mode_follows_counts () -> None:

	"""Over many loops the most repeated phrase is drawn most often."""

	playback = _composer(seed=11, weight=True, loop=4000, durations=["qn"]).compose_channel(0, {"60 62": 3, "64 65": 1})
	counts = collections.Counter(_phrases(playback))

	assert counts["60 62"] / 4000 == pytest.approx(0.75, abs=0.03)


def test_weighted_mode_on_empty_table_fails () -> None:

	"""Sampling needs at least one phrase."""

	with pytest.raises(midi_ngram.errors.SamplingError):
		_composer(weight=True, durations=["qn"]).compose_channel(0, {})


def test_empty_table_in_ordered_mode_is_silent () -> None:

	"""Nothing to play is not an error outside weighted mode."""

	playback = _composer().compose_channel(3, {})

	assert playback.units == []


def test_pause_appends_rest_after_each_phrase () -> None:

	"""A configured pause follows every phrase."""

	playback = _composer(durations=["qn"], pause_duration="hn").compose_channel(0, {"60 62": 2, "64 65": 2})
	rests = [i for i, unit in enumerate(playback.units) if unit.is_rest]

	assert rests == [2, 5]
	assert playback.units[2].duration == "hn"


def test_observed_durations_used_without_pool () -> None:

	"""Without a duration pool, durations come from those observed."""

	playback = _composer().compose_channel(0, TABLE, observed_durations={"en", "dqn"})

	assert {unit.duration for unit in playback.units} <= {"en", "dqn"}


def test_configured_pool_takes_precedence () -> None:

	"""The configured pool is used even when durations were observed."""

	playback = _composer(durations=["sn"]).compose_channel(0, TABLE, observed_durations={"en"})

	assert {unit.duration for unit in playback.units} == {"sn"}


def test_no_duration_source_is_a_configuration_error () -> None:

	"""Playback needs either a pool or observed durations."""

	with pytest.raises(midi_ngram.errors.ConfigurationError):
		_composer().compose_channel(0, TABLE)


def test_patch_defaults_to_piano () -> None:

	"""Without random patches every channel uses patch 0."""

	assert _composer(durations=["qn"]).compose_channel(0, TABLE).patch == 0


def test_random_patch_comes_from_pool () -> None:

	"""Random patches are drawn from the configured list."""

	composer = _composer(durations=["qn"], random_patch=True, patches=[33, 40])

	for channel in range(8):
		assert composer.compose_channel(channel, TABLE).patch in (33, 40)


def test_compose_orders_channels () -> None:

	"""A score holds one track per channel, in channel order, with the tempo."""

	score = _composer(durations=["qn"], bpm=90).compose({4: TABLE, 1: {"60 60": 2}}, {}, ticks_per_quarter=480)

	assert [track.channel for track in score.tracks] == [1, 4]
	assert score.bpm == 90
	assert score.ticks_per_quarter == 480
