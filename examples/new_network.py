#!/usr/bin/env python3
"""Create a new roam network interactively.

This example plays the part of the command line front end: it asks for a
network name and subnet, assembles the configuration and prints the config
file that would be saved, re-asking only for the field that was wrong.
"""

import logging
import sys
from pathlib import Path

# Add the parent directory to the path so we can import roam
sys.path.insert(0, str(Path(__file__).parent.parent))

from roam import Config, assemble_network_config
from roam.errors import EmptyNameError, RngUnavailableError, SubnetParseError


def question_prompt(question: str) -> str:
    """Ask a question on stdout and return the trimmed answer."""
    return input(f"\n{question}\n> ").strip()


def new_network() -> int:
    """Prompt for the information needed to generate a network config."""
    config = Config.from_environment()
    print("To set up your network, we need to ask a few questions first.")

    name = question_prompt("What should this network be called?")
    subnet_text = question_prompt(
        f"What subnet should be used for this network? (or leave blank for {config.get('default_subnet')})"
    )

    while True:
        try:
            network = assemble_network_config(name, subnet_text, config=config)
            break
        except EmptyNameError:
            name = question_prompt("A network name needs to be provided. What should it be called?")
        except SubnetParseError as e:
            subnet_text = question_prompt(f"Error: {e}. Please enter a subnet such as 10.0.0.0/24.")
        except RngUnavailableError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"\nNetwork is {network.name} on {network.subnet}")
    print(f"Share this token with peers so they can join: {network.key.without_secret()}")
    print("\nConfig file:")
    print(network.to_json())
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    try:
        sys.exit(new_network())
    except KeyboardInterrupt:
        print("\n👋 Cancelled")
        sys.exit(130)
