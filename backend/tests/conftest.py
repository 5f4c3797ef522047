"""Pytest configuration and fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_stocksim_env(monkeypatch):
    """Keep a developer's STOCKSIM_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("STOCKSIM_"):
            monkeypatch.delenv(key, raising=False)
