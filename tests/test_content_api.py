# -*- coding: utf-8 -*-
"""
test_content_api

Ensure the content endpoints serialize the session's current snapshot.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from portalcontent.api import ContentRouter, build_content_router
from portalcontent.core import (
    BaseUiType,
    ContentAggregator,
    MemoryUiObjectRepository,
    PluginSpec,
    SpecRegistry,
    UiObjectProperties,
    UserContext,
    UserRights,
    data_window_spec,
    report_spec,
)


class TestContentApi:
    aggregator: ContentAggregator
    app: FastAPI
    client: TestClient

    @classmethod
    def setup_class(cls) -> None:
        cls.aggregator = ContentAggregator(logging.getLogger(__name__))
        context = UserContext(
            user_id="operator",
            rights=UserRights.from_ids([5]),
            specs=SpecRegistry({"rep1": report_spec("Daily Report", url_template="/reports/{object_id}")}),
            plugins=[
                PluginSpec(
                    name="overview",
                    data_window_specs=(data_window_spec("Overview", "/dw/overview", for_everyone=True),),
                )
            ],
        )
        repository = MemoryUiObjectRepository(
            [UiObjectProperties(id=5, type_code="rep1", title="", base_type=BaseUiType.REPORT)]
        )
        cls.aggregator.init(context, repository)

        def _session_content(request: Request) -> ContentAggregator:
            return cls.aggregator

        cls.app = FastAPI()
        ContentRouter(_session_content).mount(cls.app)
        cls.client = TestClient(cls.app)

    def test_reports(self) -> None:
        response = self.client.get("/content/reports")
        assert response.status_code == 200
        assert response.json() == [
            {"kind": "report", "object_id": 5, "text": "Daily Report", "url": "/reports/5"}
        ]

    def test_data_windows(self) -> None:
        response = self.client.get("/content/data-windows")
        assert response.status_code == 200
        assert response.json() == [
            {"kind": "data_window", "object_id": None, "text": "Overview", "url": "/dw/overview"}
        ]

    def test_both_lists(self) -> None:
        response = self.client.get("/content")
        assert response.status_code == 200
        assert response.json() == self.aggregator.snapshot.as_dict()


def test_build_content_router_with_async_resolver() -> None:
    """Routers accept coroutine dependencies and custom prefixes."""

    aggregator = ContentAggregator(logging.getLogger(__name__))

    async def _resolver() -> ContentAggregator:
        return aggregator

    app = FastAPI()
    app.include_router(build_content_router(_resolver, prefix="/nav"))
    client = TestClient(app)

    response = client.get("/nav")
    assert response.status_code == 200
    assert response.json() == {"reports": [], "data_windows": []}


# The End
