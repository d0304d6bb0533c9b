"""Height-field and ripple constants."""

import math

# Wave components: (amplitude weight, spatial frequency, time multiplier)
WAVE_X = (0.5, 0.02, 1.0)  # sin(0.02x + t)
WAVE_Y = (0.3, 0.025, 1.3)  # cos(0.025y + 1.3t)
WAVE_DIAGONAL = (0.4, 0.015, 0.8)  # sin(0.015(x+y) + 0.8t)
WAVE_ANTIDIAGONAL = (0.2, 0.018, 1.7)  # cos(0.018(x-y) + 1.7t)

# Every time multiplier above and RIPPLE_FREQUENCY is a multiple of 0.1, so all
# components repeat after 20*pi of clock time
PHASE_PERIOD = 20 * math.pi

# Ripple shape
RIPPLE_RADIUS = 50.0  # length units
RIPPLE_STRENGTH = 3.0  # multiplier on intensity
RIPPLE_WAVENUMBER = 0.5
RIPPLE_FREQUENCY = 5.0
RIPPLE_FALLOFF = 0.1

# Surface faces down so it reads correctly from below the water
SURFACE_ROTATION_X = math.pi / 2

# Packed 24-bit RGB limits
MAX_COLOR = 0xFFFFFF
