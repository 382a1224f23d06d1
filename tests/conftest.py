# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for the portal content test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Iterator

import pytest

from portalcontent.conf import ContentSettings, configure, reset_settings
from portalcontent.core import (
    BaseUiType,
    MemoryUiObjectRepository,
    PluginSpec,
    SpecRegistry,
    UiObjectProperties,
    UserContext,
    UserRights,
    data_window_spec,
    report_spec,
)


class AsyncioTestPlugin:
    """Minimal asyncio runner enabling ``async def`` tests without extras."""

    def __init__(self) -> None:
        """Configure the event-loop factory used for async test execution."""

        self._loop_factory = asyncio.new_event_loop

    def pytest_pyfunc_call(self, pyfuncitem: pytest.Function) -> bool | None:
        """Execute coroutine test functions inside a dedicated event loop."""

        if not inspect.iscoroutinefunction(pyfuncitem.obj):
            return None
        signature = inspect.signature(pyfuncitem.obj)
        kwargs = {
            name: pyfuncitem.funcargs[name]
            for name in signature.parameters
            if name in pyfuncitem.funcargs
        }
        loop = self._loop_factory()
        try:
            loop.run_until_complete(pyfuncitem.obj(**kwargs))
            pending = [task for task in asyncio.all_tasks(loop) if not task.done()]
            if pending:
                for task in pending:
                    task.cancel()
                loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()
        return True


class PytestPluginRegistrar:
    """Register custom pytest plugins following project conventions."""

    def __init__(self) -> None:
        """Instantiate and expose plugin objects for registration."""

        self.asyncio_plugin = AsyncioTestPlugin()

    def configure(self, config: pytest.Config) -> None:
        """Register required plugins with the pytest plugin manager."""

        config.addinivalue_line(
            "markers", "asyncio: execute test using the built-in asyncio loop"
        )
        config.pluginmanager.register(self.asyncio_plugin, "portalcontent-asyncio-plugin")


_plugin_registrar = PytestPluginRegistrar()


def pytest_configure(config: pytest.Config) -> None:
    """Integrate custom plugins with pytest's plugin manager."""

    _plugin_registrar.configure(config)


@pytest.fixture(autouse=True)
def content_settings() -> Iterator[ContentSettings]:
    """Install default settings for every test and drop them afterwards."""

    settings = ContentSettings()
    configure(settings)
    yield settings
    reset_settings()


@pytest.fixture
def content_logger() -> logging.Logger:
    return logging.getLogger("tests.portalcontent")


@pytest.fixture
def spec_registry() -> SpecRegistry:
    return SpecRegistry(
        {
            "rep1": report_spec("Daily Report", url_template="/reports/{object_id}"),
            "rep2": report_spec("Monthly Report", url_template="/reports/{object_id}"),
            "dw1": data_window_spec("Table View", url_template="/dw/table/{object_id}"),
        }
    )


@pytest.fixture
def repository() -> MemoryUiObjectRepository:
    return MemoryUiObjectRepository(
        [
            UiObjectProperties(id=1, type_code="rep1", title="", base_type=BaseUiType.REPORT),
            UiObjectProperties(id=2, type_code="rep2", title="Annual", base_type=BaseUiType.REPORT),
            UiObjectProperties(id=3, type_code="dw1", title="", base_type=BaseUiType.DATA_WINDOW),
            UiObjectProperties(id=4, type_code="dw1", title="Alarms", base_type=BaseUiType.DATA_WINDOW),
        ]
    )


@pytest.fixture
def public_plugin() -> PluginSpec:
    return PluginSpec(
        name="overview",
        report_specs=(
            report_spec("Events", "/plugins/events", for_everyone=True),
            report_spec("Hidden", "/plugins/hidden"),
        ),
        data_window_specs=(
            data_window_spec("Overview", "/dw/overview", for_everyone=True),
        ),
    )


@pytest.fixture
def user_context(spec_registry: SpecRegistry, public_plugin: PluginSpec) -> UserContext:
    return UserContext(
        user_id="operator",
        rights=UserRights.from_ids([1, 2, 3, 4]),
        specs=spec_registry,
        plugins=[public_plugin],
    )


# The End
