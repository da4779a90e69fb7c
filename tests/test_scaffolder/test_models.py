"""Tests for ScaffoldRequest validation and helpers."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from abphelper.scaffolder.models import ScaffoldRequest, ScaffoldResult, ScaffoldState, ViewFileSpec

pytestmark = pytest.mark.unit


def _request(**overrides) -> ScaffoldRequest:
    data = {
        "business_name": "Order",
        "service_name": "OrderService",
        "service_interface_name": "IOrderService",
        "service_folder": "Sales\\Orders",
        "view_folder": "App\\Main\\views",
        "view_files": [{"file_name": "OrderList", "is_popup": False}],
    }
    data.update(overrides)
    return ScaffoldRequest.model_validate(data)


class TestScaffoldRequest:
    def test_valid(self):
        request = _request()
        assert request.view_files == [ViewFileSpec(file_name="OrderList", is_popup=False)]

    def test_names_must_differ(self):
        with pytest.raises(ValidationError, match="must differ"):
            _request(service_interface_name="OrderService")

    @pytest.mark.parametrize(
        "field", ["service_name", "service_interface_name", "service_folder", "view_folder"]
    )
    def test_blank_fields_rejected(self, field):
        with pytest.raises(ValidationError):
            _request(**{field: "  "})

    @pytest.mark.parametrize("file_name", ["   ", "Orders\\OrderList", "Orders/OrderList"])
    def test_invalid_view_file_name_rejected(self, file_name):
        with pytest.raises(ValidationError):
            _request(view_files=[{"file_name": file_name}])

    def test_view_file_name_stripped(self):
        assert _request(view_files=[{"file_name": " OrderList "}]).view_files[0].file_name == "OrderList"

    def test_duplicate_view_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate view file name"):
            _request(view_files=[{"file_name": "OrderList"}, {"file_name": "orderlist"}])

    def test_is_frozen(self):
        request = _request()
        with pytest.raises(ValidationError):
            request.service_name = "Other"

    @pytest.mark.parametrize("count, expected", [(0, 2), (1, 4), (3, 8)])
    def test_total_steps(self, count, expected):
        views = [{"file_name": f"View{i}"} for i in range(count)]
        assert _request(view_files=views).total_steps == expected

    def test_load_from_json(self, tmp_path):
        path = tmp_path / "order.json"
        path.write_text(json.dumps(_request().model_dump()), encoding="utf-8")
        assert ScaffoldRequest.load(path) == _request()


class TestFromBusinessName:
    def test_conventional_names(self):
        request = ScaffoldRequest.from_business_name("Order")
        assert request.service_name == "OrderAppService"
        assert request.service_interface_name == "IOrderAppService"
        assert request.service_folder == "Order"
        assert request.view_folder == "App\\Main\\views\\order"

    def test_page_and_popup_views(self):
        request = ScaffoldRequest.from_business_name("Order")
        assert request.view_files == [
            ViewFileSpec(file_name="order", is_popup=False),
            ViewFileSpec(file_name="createOrEditOrderModal", is_popup=True),
        ]


class TestScaffoldResult:
    def test_success_only_when_done(self):
        assert ScaffoldResult(state=ScaffoldState.DONE).success
        assert not ScaffoldResult(state=ScaffoldState.FAILED).success
