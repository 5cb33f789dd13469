"""Text normalization utilities for model replies.

Module scope:
- Bullet-list normalization of free-form model text (`bullet_formatter`).

Determinism profile:
- Fully deterministic rule logic; no model calls.
"""
