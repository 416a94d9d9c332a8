"""Gymnasium environments for the falling block puzzle."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="FallingBlock-10x15-v0",
    entry_point="falling_block_puzzle.env.falling_block_env:FallingBlockEnv",
)
