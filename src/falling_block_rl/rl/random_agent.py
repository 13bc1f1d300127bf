from __future__ import annotations

import argparse
from typing import Optional, Sequence

import gymnasium as gym

from falling_block_rl.env import ENV_ID
from falling_block_rl.utils.logging import setup_logger


def run_random(
    episodes: int = 3,
    max_steps: int = 2000,
    seed: Optional[int] = None,
    log_level: str = "info",
) -> float:
    logger = setup_logger(name="falling_block_rl.random_agent", level=log_level)
    env = gym.make(ENV_ID, max_episode_steps=max_steps)
    env.action_space.seed(seed)
    total_reward = 0.0
    try:
        for ep in range(episodes):
            obs, info = env.reset(seed=None if seed is None else seed + ep)
            ep_return = 0.0
            steps = 0
            done = False
            while not done:
                obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
                ep_return += float(reward)
                steps += 1
                done = terminated or truncated
            total_reward += ep_return
            logger.info(
                "episode %d/%d return=%.1f steps=%d score=%d lines=%d",
                ep + 1,
                episodes,
                ep_return,
                steps,
                info["score"],
                info["lines_cleared_total"],
            )
    finally:
        env.close()
    logger.info("Random agent total reward: %.2f", total_reward)
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=f"Play {ENV_ID} with uniformly random actions.")
    p.add_argument("--episodes", type=int, default=3)
    p.add_argument("--max-steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", type=str, default="info")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_random(episodes=args.episodes, max_steps=args.max_steps, seed=args.seed, log_level=args.log_level)


if __name__ == "__main__":  # pragma: no cover
    main()
