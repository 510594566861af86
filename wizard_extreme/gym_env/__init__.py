"""Gymnasium environment for Wizard Extreme.

- WizardExtremeEnv: MaskablePPO-compatible env, one agent seat against two bots,
  373-dim observations and a 67-wide action mask
"""

from wizard_extreme.gym_env.wizard_env import WizardExtremeEnv

__all__ = ["WizardExtremeEnv"]
