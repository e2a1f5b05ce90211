from __future__ import annotations

import importlib
import sys
from typing import Iterable

from webhook_models.core.logger import get_logger

logger = get_logger(__name__)


MODELS_PACKAGE = "webhook_models.models"

BUILTIN_MODEL_MODULES: tuple[str, ...] = (
    "webhook_models.models.application",
    "webhook_models.models.dashboard",
    "webhook_models.models.endpoint",
    "webhook_models.models.event_type",
)


_LOADED = False


def load_builtin_models(*, reload: bool = False, modules: Iterable[str] = BUILTIN_MODEL_MODULES) -> None:
    """Import built-in model modules so their decorators register them.

    In production, call with reload=False (default) so imports are cheap.
    In tests, call with reload=True to clear the registry and re-run decorators.
    Reloading also re-imports the webhook_models.models package so its exports
    are the classes the registry now holds. References taken before the reload
    keep pointing at the old classes.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    modules = tuple(modules)

    if reload:
        from webhook_models.registry import RecordRegistry

        RecordRegistry.clear()
        # The package imports every submodule, so all of them go before any import.
        for module_name in (MODELS_PACKAGE, *modules):
            sys.modules.pop(module_name, None)

    for module_name in modules:
        importlib.import_module(module_name)
        logger.debug(f"Loaded model module {module_name}")

    _LOADED = True
