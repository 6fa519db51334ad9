import builtins
import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers.

    Raises EOFError once the script runs out, like a closed stdin.
    """
    prompts = []

    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr(builtins, "input", fake_input)
        return prompts

    return _feed


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("curie_temperature")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
