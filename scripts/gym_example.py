#!/usr/bin/env python3
"""Example script showing how to use the Wizard Extreme Gymnasium environment.

This demonstrates:
1. Creating the environment
2. Playing masked random actions (the way MaskablePPO samples)
3. Collecting score statistics over several episodes
"""

import argparse

import numpy as np

from wizard_extreme.gym_env import WizardExtremeEnv


def masked_random_action(env: WizardExtremeEnv, rng: np.random.Generator) -> int:
    """Sample uniformly among the agent's legal actions."""
    return int(rng.choice(np.flatnonzero(env.action_masks())))


def single_episode(seed: int) -> None:
    """Play and render one round."""
    print("\n" + "=" * 60)
    print("Wizard Extreme Gymnasium Environment - Random Agent Example")
    print("=" * 60 + "\n")

    env = WizardExtremeEnv(opponent_bot_type="rule_based", render_mode="ansi")
    rng = np.random.default_rng(seed)

    observation, info = env.reset(seed=seed)
    print(f"Observation shape: {observation.shape}")
    print(f"Initial info: {info}")

    total_reward = 0.0
    step_count = 0

    while True:
        observation, reward, terminated, truncated, info = env.step(masked_random_action(env, rng))
        total_reward += reward
        step_count += 1

        if terminated or truncated:
            print(env.render())
            print("\nEpisode finished!")
            print(f"  Agent steps: {step_count}")
            print(f"  Total reward: {total_reward:.2f}")
            print(f"  Scores: {info.get('scores')}")
            break

    env.close()


def multiple_episodes(episodes: int, seed: int) -> None:
    """Run several rounds and report averages."""
    env = WizardExtremeEnv(opponent_bot_type="rule_based")
    rng = np.random.default_rng(seed)

    rewards = []
    scores = []
    wins = 0

    for episode in range(episodes):
        env.reset(seed=seed + episode)
        total_reward = 0.0

        while True:
            _, reward, terminated, truncated, info = env.step(masked_random_action(env, rng))
            total_reward += reward
            if terminated or truncated:
                break

        round_scores = info.get("scores", [0.0, 0.0, 0.0])
        rewards.append(total_reward)
        scores.append(round_scores[env.agent_seat])
        if int(np.argmax(round_scores)) == env.agent_seat:
            wins += 1
        print(f"Episode {episode + 1}: Reward = {total_reward:.2f}, Score = {scores[-1]:.0f}")

    env.close()

    print(f"\nStatistics over {episodes} episodes:")
    print(f"  Average reward: {np.mean(rewards):.2f} ± {np.std(rewards):.2f}")
    print(f"  Average score: {np.mean(scores):.2f} ± {np.std(scores):.2f}")
    print(f"  Win rate: {wins}/{episodes} ({wins / episodes * 100:.0f}%)")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Wizard Extreme Gym Environment Examples")
    parser.add_argument("--mode", choices=["single", "multiple"], default="single")
    parser.add_argument("--episodes", type=int, default=5, help="Episodes for multiple mode")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    if args.mode == "single":
        single_episode(args.seed)
    else:
        multiple_episodes(args.episodes, args.seed)


if __name__ == "__main__":
    main()
