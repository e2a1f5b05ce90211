import logging

import pytest

from webhook_models.bootstrap import load_builtin_models


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("webhook_models")
    handlers = list(root.handlers)
    root_level, package_level = root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.fixture
def builtin_registry():
    load_builtin_models(reload=True)
