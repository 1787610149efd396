#!/usr/bin/env python3
"""
Drive the simulated skills backend through the HTTP client and print each
stage to the terminal: created skills, partial update, badges, delete.

Usage (from repo root):
  python scripts/run_mock_demo.py
  python scripts/run_mock_demo.py --delay-ms 0 --count 10
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from skillboard.database.local_storage import InMemoryStorage
from skillboard.integrations.clients.skills_api import SkillsApiClient
from skillboard.mock_api.factory import create_mock_client
from skillboard.utils.config_loader import load_mock_api_config

DEMO_SKILLS = [
    ("Python", 5), ("SQL", 4), ("Docker", 3), ("Go", 5), ("Rust", 2),
    ("Kubernetes", 4), ("TypeScript", 4), ("Bash", 5), ("Terraform", 3),
    ("GraphQL", 4), ("Redis", 4), ("Linux", 5), ("Git", 5), ("CSS", 2), ("React", 4),
]


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


async def main(count: int, delay_ms: int | None):
    setup_logging()
    config = load_mock_api_config()
    if delay_ms is not None:
        config = config.model_copy(update={"delay_ms": delay_ms})

    async with create_mock_client(config, storage=InMemoryStorage()) as http:
        api = SkillsApiClient(api_prefix=config.api_prefix, client=http)

        created = []
        for name, level in DEMO_SKILLS[:count]:
            created.append(await api.create_skill(name, level))
        print_stage("SKILLS", [s.model_dump() for s in await api.list_skills()])
        print_stage("BADGES", [b.model_dump() for b in await api.list_badges()])

        if created:
            first = created[0]
            updated = await api.update_skill(first.id, level=1)
            print_stage(f"PATCH {first.id} level=1", updated.model_dump())
            await api.delete_skill(created[-1].id)
            print_stage("BADGES AFTER UPDATE + DELETE", [b.model_dump() for b in await api.list_badges()])


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the skillboard mock API demo")
    parser.add_argument("--count", type=int, default=len(DEMO_SKILLS), help="Number of demo skills to create")
    parser.add_argument("--delay-ms", type=int, default=None, help="Override the simulated latency")
    args = parser.parse_args()
    asyncio.run(main(args.count, args.delay_ms))
