"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127).
"""

# Every resynthesized note is played at this velocity
DEFAULT_VELOCITY = 120
