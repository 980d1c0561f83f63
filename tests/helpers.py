"""Test doubles for shell commands and HTTP sessions."""

from __future__ import annotations

from mission_control.core.shell import CommandError


class FakeRunner:
    """Stand-in for run_command keyed on a command prefix.

    A value that is an exception instance is raised; anything else is
    returned as stdout. Unmatched commands fail like a missing binary.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls: list[str] = []

    def __call__(self, command):
        self.calls.append(command)
        for prefix, response in self.responses.items():
            if command.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise CommandError(command, 127, "sh: command not found")


class FakeResponse:
    def __init__(self, payload=None, invalid=False):
        self.payload = payload
        self.invalid = invalid

    def json(self):
        if self.invalid:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Returns queued responses in order; exceptions are raised."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
