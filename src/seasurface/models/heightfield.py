"""Layered sine/cosine height field and ripple perturbation.

Both functions are pure: heights depend only on the undisplaced plane
coordinates, the accumulated clock, and the parameters passed in. They
are JIT compiled and vectorised over every vertex of the grid.

    h(x, y, t) = A*0.5*sin(0.02x + t)
               + A*0.3*cos(0.025y + 1.3t)
               + A*0.4*sin(0.015(x+y) + 0.8t)
               + A*0.2*cos(0.018(x-y) + 1.7t)
"""

import jax.numpy as jnp
from jax import Array, jit

from seasurface.core.constants import (
    RIPPLE_FALLOFF,
    RIPPLE_FREQUENCY,
    RIPPLE_RADIUS,
    RIPPLE_STRENGTH,
    RIPPLE_WAVENUMBER,
    WAVE_ANTIDIAGONAL,
    WAVE_DIAGONAL,
    WAVE_X,
    WAVE_Y,
)
from seasurface.core.types import FloatArray, Scalar


@jit
def wave_height(x: FloatArray, y: FloatArray, t: Scalar, amplitude: Scalar) -> Array:
    """Wave height at plane coordinates (x, y) and clock time t.

    Args:
        x: Original x coordinates of the vertices.
        y: Original y coordinates of the vertices.
        t: Accumulated animation clock.
        amplitude: Wave amplitude A.

    Returns:
        Heights with the same shape as ``x``.
    """
    x = jnp.asarray(x)
    y = jnp.asarray(y)

    w_x, k_x, f_x = WAVE_X
    w_y, k_y, f_y = WAVE_Y
    w_d, k_d, f_d = WAVE_DIAGONAL
    w_a, k_a, f_a = WAVE_ANTIDIAGONAL

    wave1 = jnp.sin(x * k_x + t * f_x) * amplitude * w_x
    wave2 = jnp.cos(y * k_y + t * f_y) * amplitude * w_y
    wave3 = jnp.sin((x + y) * k_d + t * f_d) * amplitude * w_d
    wave4 = jnp.cos((x - y) * k_a + t * f_a) * amplitude * w_a

    return wave1 + wave2 + wave3 + wave4


@jit
def ripple_offset(
    x: FloatArray,
    y: FloatArray,
    center_x: Scalar,
    center_z: Scalar,
    t: Scalar,
    intensity: Scalar = 1.0,
) -> Array:
    """Additive ripple displacement around (center_x, center_z).

    The ripple centre lives in the plane's own (x, y) frame; the name
    ``center_z`` follows the world axis the plane's y maps to once the
    surface is rotated into place.

    Vertices at or beyond ``RIPPLE_RADIUS`` receive exactly zero.
    """
    x = jnp.asarray(x)
    y = jnp.asarray(y)

    distance = jnp.sqrt((x - center_x) ** 2 + (y - center_z) ** 2)
    strength = intensity * RIPPLE_STRENGTH

    effect = (
        jnp.sin(distance * RIPPLE_WAVENUMBER - t * RIPPLE_FREQUENCY)
        * strength
        * (1.0 - distance / RIPPLE_RADIUS)  # Decay with distance from centre
        * jnp.maximum(0.0, jnp.cos(distance * RIPPLE_FALLOFF))
    )

    return jnp.where(distance < RIPPLE_RADIUS, effect, 0.0)
