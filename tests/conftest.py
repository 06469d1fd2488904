"""Shared fixtures: a script runner double that never spawns a process."""

import pytest

from contacts_mcp.applescript.runner import BaseScriptRunner
from contacts_mcp.contacts.client import ContactsClient


class FakeRunner(BaseScriptRunner):
    """Returns canned output (or raises ``error``) and records every call."""

    def __init__(self, outputs=None, error=None):
        self.outputs = list(outputs or [])
        self.error = error
        self.scripts = []
        self.opened = []

    def run(self, script):
        self.scripts.append(script)
        if self.error is not None:
            raise self.error
        return self.outputs.pop(0) if self.outputs else ""

    def open_application(self, name):
        self.opened.append(name)
        if self.error is not None:
            raise self.error

    @property
    def last_script(self):
        return self.scripts[-1]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def client(runner):
    return ContactsClient(runner=runner)
