#!/usr/bin/env python3
"""
Demo seed script — populates the directory with sample developers.

!! NOT FOR PRODUCTION !!
This script creates a demo user with a known password and a handful of
developer records. It is intended ONLY for local demos and frontend
development.

Usage:
    # With the API server running on localhost:8000:
    python demo/seed.py

    # Delete the JSON collections named in the settings (.env):
    python demo/seed.py --reset

    # Custom server URL:
    python demo/seed.py --base-url http://localhost:9000

Login credentials after seeding:
    ┌──────────────────────────────┬───────────────────┐
    │ Email                        │ Password          │
    ├──────────────────────────────┼───────────────────┤
    │ demo@devdirectory.com        │ DemoPass123       │
    └──────────────────────────────┴───────────────────┘
"""

import argparse
import asyncio
from pathlib import Path

import httpx

DEMO_USER = {
    "name": "Demo User",
    "email": "demo@devdirectory.com",
    "password": "DemoPass123",
}

DEVELOPERS = [
    {"name": "Alice Chen", "role": "Frontend", "techStack": "React, TypeScript, CSS",
     "experience": 4, "description": "Design systems and accessibility.", "joiningDate": "2021-03-15"},
    {"name": "Bob Martinez", "role": "Backend", "techStack": "Go, PostgreSQL, Redis",
     "experience": 7, "joiningDate": "2018-09-01"},
    {"name": "Carol Nguyen", "role": "Full-Stack", "techStack": "Python, FastAPI, Vue",
     "experience": 5, "description": "Owns the internal tooling portal."},
    {"name": "Dave Johnson", "role": "Backend", "techStack": "Java, Spring, Kafka",
     "experience": 10},
    {"name": "Erin Patel", "role": "Frontend", "techStack": "Angular, RxJS",
     "experience": 2, "joiningDate": "2023-06-12"},
    {"name": "Farid Haddad", "role": "Full-Stack", "techStack": "Node, React, MongoDB",
     "experience": 3},
    {"name": "Grace Kim", "role": "Backend", "techStack": "Rust, gRPC",
     "experience": 6, "description": "Performance and observability."},
    {"name": "Hugo Silva", "role": "Frontend", "techStack": "Svelte, Tailwind",
     "experience": 1},
    {"name": "Ines Moreau", "role": "Full-Stack", "techStack": "Django, HTMX, PostgreSQL",
     "experience": 8},
    {"name": "Jonas Berg", "role": "Backend", "techStack": "Elixir, Phoenix",
     "experience": 4},
    {"name": "Keiko Tanaka", "role": "Frontend", "techStack": "React Native, Expo",
     "experience": 3},
    {"name": "Liam O'Brien", "role": "Full-Stack", "techStack": "Ruby on Rails, Stimulus",
     "experience": 9},
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def log(msg: str) -> None:
    print(f"  {msg}")


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def get_token(client: httpx.AsyncClient, base_url: str) -> str:
    """Sign up the demo user, or log in if it already exists. Returns a JWT."""
    resp = await client.post(f"{base_url}/api/auth/signup", json=DEMO_USER)
    if resp.status_code == 400 and resp.json().get("error_type") == "duplicate_email":
        resp = await client.post(f"{base_url}/api/auth/login", json={
            "email": DEMO_USER["email"],
            "password": DEMO_USER["password"],
        })
    resp.raise_for_status()
    return resp.json()["token"]


async def create_developer(client: httpx.AsyncClient, base_url: str, token: str, body: dict) -> dict:
    resp = await client.post(
        f"{base_url}/api/developers",
        json=body,
        headers=auth_header(token),
    )
    resp.raise_for_status()
    return resp.json()


# ---------------------------------------------------------------------------
# Seed logic
# ---------------------------------------------------------------------------

async def seed(base_url: str) -> None:
    async with httpx.AsyncClient(timeout=30.0) as client:
        print("\nAuthenticating demo user...")
        token = await get_token(client, base_url)
        log(DEMO_USER["email"])

        print("\nCreating developers...")
        for body in DEVELOPERS:
            developer = await create_developer(client, base_url, token, body)
            log(f"{developer['name']:<16s} {developer['role']:<10s} {developer['techStack']}")

    print("\n========================================")
    print("  SEED COMPLETE — Login Credentials")
    print("========================================")
    print(f"\n  {'Email':<30s} {'Password'}")
    print(f"  {'─' * 30} {'─' * 20}")
    print(f"  {DEMO_USER['email']:<30s} {DEMO_USER['password']}")
    print()


def reset_data() -> None:
    """Delete the JSON collections; the server recreates them empty on next use."""
    from app.config import settings

    if settings.STORAGE_BACKEND != "json":
        print(f"\n  STORAGE_BACKEND is {settings.STORAGE_BACKEND!r}; only JSON collections are reset.\n")
        return

    data_dir = Path(settings.DATA_DIR)
    for filename in (settings.USERS_FILE, settings.DEVELOPERS_FILE):
        path = data_dir / filename
        if path.exists():
            path.unlink()
            print(f"\n  Deleted {path}")
        else:
            print(f"\n  No collection found at {path}")
    print()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Demo seed script — NOT FOR PRODUCTION",
        epilog="Creates a demo user and sample developers.",
    )
    parser.add_argument(
        "--base-url", default="http://localhost:8000",
        help="Base URL of the running API (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--reset", action="store_true",
        help="Delete the JSON collections from DATA_DIR and exit",
    )
    args = parser.parse_args()

    if args.reset:
        reset_data()
        return

    await seed(args.base_url)


if __name__ == "__main__":
    asyncio.run(main())
