class ConfigurationError (ValueError):

	"""
	Raised when a configuration option is missing, out of range or the wrong shape.
	"""


class SamplingError (RuntimeError):

	"""
	Raised when playback is requested before there is anything to sample from.
	"""
