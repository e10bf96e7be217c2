#!/usr/bin/env python3
"""
Basic repofolio usage example.

Loads the projects of a GitHub user and prints the projects section as
plain text, the way a page template would draw it.
Run with: REPOFOLIO_USERNAME=octocat python examples/basic_usage.py
"""

import asyncio
import logging

from repofolio import AsyncPortfolioClient, Loaded, LoadState, PortfolioConfig, configure_logging


class TextRenderer:
    """Draws the projects section to stdout."""

    def __init__(self, config: PortfolioConfig) -> None:
        self.config = config

    def render(self, state: LoadState) -> None:
        print("== My Projects ==")
        if not isinstance(state, Loaded):
            print("Loading projects...")
            return

        for item in state.projects:
            meta = [f"stars {item.stars}", f"forks {item.forks}", f"Updated: {item.updated_at}"]
            if item.language:
                meta.insert(0, item.language)
            print(f"- {item.title}: {item.description}")
            print(f"  {' | '.join(meta)}")
            print(f"  {item.github_url}")

        print("== Contact ==")
        if self.config.contact_email:
            print(f"  {self.config.contact_email}")
        for label, url in self.config.social_links.items():
            print(f"  {label}: {url}")


async def main() -> None:
    configure_logging(level=logging.INFO)

    config = PortfolioConfig.from_env()
    renderer = TextRenderer(config)

    async with AsyncPortfolioClient(config) as client:
        view = client.projects_view()
        view.activate()
        view.render(renderer)

        await view.wait()
        view.render(renderer)
        view.deactivate()


if __name__ == "__main__":
    asyncio.run(main())
