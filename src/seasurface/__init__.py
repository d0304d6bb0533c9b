"""Procedural ocean surface animator.

Displaces a flat plane mesh with a layered sine/cosine height field, with
transient ripple perturbations and named weather presets.
"""

__version__ = "0.1.0"
