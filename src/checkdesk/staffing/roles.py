"""Release staffing: developers, deployers and specialists behind capability protocols.

Callers depend on IDeveloper / IDeployer / ISpecialist only; which concrete
role fills the capability is decided by the roster lookups.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from checkdesk.core.protocols import IDeployer, IDeveloper, ISpeaker, ISpecialist

logger = logging.getLogger(__name__)

DEVELOPERS = ("John", "Mary", "Vince")
DEPLOYERS = ("Tina", "Adam", "Emma")
SPECIALISTS = ("Steve", "Alicia")

ENVIRONMENTS = ("dev", "staging", "prod")


class Developer:
    def __init__(self, name: str) -> None:
        self.name = name

    def develop(self, system: str) -> str:
        return _record(f"{self.name} is developing {system}")


class Deployer:
    def __init__(self, name: str) -> None:
        self.name = name

    def deploy(self, system: str, environment: str) -> str:
        return _record(f"{self.name} is deploying {system} to {environment}")


class Specialist:
    """Develops and deploys; used for systems restricted to a single person."""

    def __init__(self, name: str) -> None:
        self.name = name

    def develop(self, system: str) -> str:
        return _record(f"{self.name} is developing {system}")

    def deploy(self, system: str, environment: str) -> str:
        return _record(f"{self.name} is deploying {system} to {environment}")


class Person:
    def __init__(self, name: str) -> None:
        self.name = name

    def speak(self) -> str:
        return f"I'm {self.name}"


def say_something(speaker: ISpeaker) -> str:
    return _record(f"Speaking -> {speaker.speak()}")


def _record(line: str) -> str:
    logger.info(line)
    return line


def find_developer(rng: random.Random | None = None) -> IDeveloper:
    return Developer((rng or random).choice(DEVELOPERS))


def find_deployer(rng: random.Random | None = None) -> IDeployer:
    return Deployer((rng or random).choice(DEPLOYERS))


def find_specialist(rng: random.Random | None = None) -> ISpecialist:
    return Specialist((rng or random).choice(SPECIALISTS))


def run_release(
    systems: Sequence[str],
    environments: Sequence[str] = ENVIRONMENTS,
    rng: random.Random | None = None,
) -> list[str]:
    """Develop each system once, then deploy it to every environment.

    A fresh deployer is picked per environment. Returns the activity lines.
    """
    activity: list[str] = []
    for system in systems:
        logger.info("Starting system %s", system)
        activity.append(find_developer(rng).develop(system))
        for environment in environments:
            activity.append(find_deployer(rng).deploy(system, environment))
        logger.info("Completed system %s", system)
    return activity


def run_special_release(
    systems: Sequence[str],
    environments: Sequence[str] = ENVIRONMENTS,
    rng: random.Random | None = None,
) -> list[str]:
    """Like run_release, but one specialist handles every step of a system."""
    activity: list[str] = []
    for system in systems:
        logger.info("Starting special system %s", system)
        specialist = find_specialist(rng)
        activity.append(specialist.develop(system))
        for environment in environments:
            activity.append(specialist.deploy(system, environment))
        logger.info("Completed special system %s", system)
    return activity
