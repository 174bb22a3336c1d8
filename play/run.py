"""
Play Gopher Rain in a window, or evaluate a random policy headlessly

    python -m play.run --human
    python -m play.run --n-episodes 20 --seed 7
"""

import argparse
import logging
import random
from typing import Optional

import numpy as np

from game.gopher_rain import GameState, GopherRainEnv
from play.configs.gopher_rain_config import ENV_CONFIG, EVAL_CONFIG, GAME_CONFIG, WINDOW_CONFIG

logger = logging.getLogger(__name__)


def evaluate_random(
    n_episodes: int = 10,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
    lives_enabled: bool = True,
):
    """Evaluate a random policy baseline"""
    print("Evaluating random policy baseline...")

    config = dict(ENV_CONFIG, lives_enabled=lives_enabled)
    if max_steps is not None:
        config["max_steps"] = max_steps
    env = GopherRainEnv(render_mode=None, **config)

    episode_rewards = []
    episode_scores = []
    episode_lengths = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_scores.append(info["score"])
        episode_lengths.append(steps)

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {steps}")

    env.close()

    results = {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_score": float(np.mean(episode_scores)),
        "mean_length": float(np.mean(episode_lengths)),
        "episode_rewards": episode_rewards,
        "episode_scores": episode_scores,
    }

    print("\n" + "=" * 50)
    print(f"Random Policy Results ({n_episodes} episodes):")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Score: {results['mean_score']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")
    print("=" * 50)

    return results


def main():
    parser = argparse.ArgumentParser(description="Gopher Rain")
    parser.add_argument(
        "--human",
        action="store_true",
        help="Open a window and play with the arrow keys (Esc quits)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of random-policy episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help=f"Episode length cap (default: {ENV_CONFIG['max_steps']})",
    )
    parser.add_argument(
        "--no-lives",
        action="store_true",
        help="Score-only variant: missed coins cost nothing",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.human:
        logger.info(f"Starting interactive game with seed {args.seed}")
        from game.gopher_rain.window import play_human

        game = GameState(
            rng=random.Random(args.seed),
            **dict(GAME_CONFIG, lives_enabled=not args.no_lives),
        )
        score = play_human(game, **WINDOW_CONFIG)
        print(f"Final score: {score:03d}")
        return

    evaluate_random(
        n_episodes=args.n_episodes,
        seed=args.seed,
        max_steps=args.max_steps,
        lives_enabled=not args.no_lives,
    )


if __name__ == "__main__":
    main()
