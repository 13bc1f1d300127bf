"""Gymnasium environments for Falling Block RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .falling_block_env import NOOP, FallingBlockEnv

ENV_ID = "FallingBlock-10x20-v0"

# Register default 10x20 falling-block environment (5 discrete actions)
register(
    id=ENV_ID,
    entry_point="falling_block_rl.env.falling_block_env:FallingBlockEnv",
)

__all__ = ["ENV_ID", "NOOP", "FallingBlockEnv"]
