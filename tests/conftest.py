"""
Test configuration for the healthquote project.

Ensures the project root is on sys.path so tests can import `healthquote.*`
modules, and provides stand-in rebate tier data.
"""
import os
import sys


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest


class StubTier:
    """Rebate tier returning a fixed percentage under 65 and a higher one after."""

    def __init__(self, key, base, senior):
        self.key = key
        self.base = base
        self.senior = senior
        self.ages = []

    def get_percentage(self, age):
        self.ages.append(age)
        if age is None:
            return 0.0
        return self.senior if age >= 65 else self.base


class StubRebateLookup:
    def __init__(self, data):
        self.data = data
        self.tiers = {key: StubTier(key, *values) for key, values in data.items()}

    def get_tier(self, income_tier):
        return self.tiers[income_tier]


AGR_DATA = {
    "Base": (25.934, 30.256),
    "Tier1": (17.289, 21.612),
    "Tier3": (0.0, 0.0),
}

TOP_BUNDLE = {"Code": "Top", "BaseBundle": "X", "Bundles": ["A", "B"]}
CORE_BUNDLE = {"Code": "Core", "BaseBundle": "CoreExtras", "Bundles": []}


@pytest.fixture
def agr():
    return StubRebateLookup(AGR_DATA)


@pytest.fixture
def catalog_data():
    return {
        "Core": dict(CORE_BUNDLE, Bundles=list(CORE_BUNDLE["Bundles"])),
        "Top": dict(TOP_BUNDLE, Bundles=list(TOP_BUNDLE["Bundles"])),
    }


@pytest.fixture
def model(agr, catalog_data):
    from healthquote.core.quote_model import QuoteModel

    return QuoteModel(
        agr=agr,
        lhc={"Loading": 0},
        attributes={
            "PersonalDetails": {
                "PolicyHolder": {
                    "Title": "Mr",
                    "FirstName": "Alex",
                    "LastName": "Citizen",
                    "Email": "alex@example.com",
                    "DateOfBirth": "1980-04-12",
                }
            },
            "ProductSelection.Hospital.Code": "None",
        },
        pre_bundled_extras_products=catalog_data,
    )


@pytest.fixture
def recorder():
    """Collects (event_name, args) pairs from listeners built with `recorder.listener(name)`."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def listener(self, name):
            def _listener(*args):
                self.calls.append((name, args))
            return _listener

        def names(self):
            return [name for name, _ in self.calls]

    return Recorder()
