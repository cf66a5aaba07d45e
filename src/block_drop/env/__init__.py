"""Gymnasium environments for block-drop."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default 12x20 well
register(
    id="BlockDrop-12x20-v0",
    entry_point="block_drop.env.block_drop_env:BlockDropEnv",
)

__all__ = ["BlockDrop-12x20-v0"]
