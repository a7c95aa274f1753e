"""Scripted login scenarios run against a single runner."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .models import Credentials, LoginResult
from .runner import LoginTestRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """One login attempt and the outcome it should produce."""

    name: str
    credentials: Credentials
    expect_success: bool


@dataclass(frozen=True)
class ScenarioOutcome:
    """Result of running a scenario."""

    scenario: Scenario
    result: LoginResult

    @property
    def passed(self) -> bool:
        return self.result.success == self.scenario.expect_success


def default_scenarios(valid: Credentials, invalid: Credentials) -> list[Scenario]:
    """The valid-then-invalid pair the ``run`` command executes."""
    return [
        Scenario("valid credentials", valid, expect_success=True),
        Scenario("invalid credentials", invalid, expect_success=False),
    ]


def run_scenarios(
    runner: LoginTestRunner,
    scenarios: Sequence[Scenario],
    pause: float = 2.0,
    on_outcome: Callable[[ScenarioOutcome], None] | None = None,
) -> list[ScenarioOutcome]:
    """Set up *runner*, run each scenario in order, and always tear down.

    Between scenarios the session is returned to the login page: by logging
    out after a successful login, or by re-navigating otherwise.
    Session start failures propagate after teardown.
    """
    outcomes: list[ScenarioOutcome] = []
    try:
        runner.setup()
        for index, scenario in enumerate(scenarios):
            if index:
                if outcomes[-1].result.success:
                    runner.logout()
                else:
                    runner.navigate_to_login_page()

            logger.info("Testing %s", scenario.name)
            creds = scenario.credentials
            outcome = ScenarioOutcome(scenario, runner.perform_login(creds.username, creds.password))
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
            if pause > 0:
                time.sleep(pause)
    finally:
        runner.tear_down()
    return outcomes
