import os

import pytest

RESOURCES = os.path.join(os.path.dirname(__file__), "resources")


@pytest.fixture
def example_input_path():
    return os.path.join(RESOURCES, "example_input")


@pytest.fixture
def example_output():
    with open(os.path.join(RESOURCES, "example_output"), "r", encoding="utf-8") as f:
        return f.read().strip("\n")
