"""
餐品数据模型测试
"""

import pytest
from pydantic import ValidationError

from ..models.dish import (
    Dish,
    DishCategory,
    DishCreate,
    DishListResponse,
    DishQueryParams,
    DishStatus,
    DishUpdate,
    OperationResult,
)


class TestDishModels:
    """餐品模型测试"""

    def test_parse_camel_case_payload(self):
        """测试解析后端驼峰字段"""
        dish = Dish.model_validate({
            "id": 3,
            "name": "麻婆豆腐",
            "categoryId": 1,
            "price": 18,
            "image": "mapo.png",
            "description": "",
            "status": 1,
            "saleNum": 56,
            "createTime": "2024-01-15T10:30:00",
        })

        assert dish.category_id == 1
        assert dish.sale_num == 56
        assert dish.price == 18.0
        assert dish.create_time is not None
        assert dish.update_time is None
        assert dish.is_active

    def test_inactive_status(self):
        """测试下架状态"""
        dish = Dish(
            id=1, name="凉皮", category_id=2, price=8, image="", description="",
            status=DishStatus.INACTIVE, sale_num=0,
        )

        assert dish.status == 0
        assert not dish.is_active

    def test_create_payload_has_no_id(self):
        """测试创建模型不包含ID"""
        data = DishCreate(
            name="凉皮", category_id=2, price=8, image="liangpi.png",
            description="夏日", status=1, sale_num=0,
        )

        payload = data.to_payload()

        assert "id" not in payload
        assert payload["categoryId"] == 2
        assert payload["saleNum"] == 0

    def test_create_requires_fields(self):
        """测试创建模型缺少字段时报错"""
        with pytest.raises(ValidationError):
            DishCreate(name="凉皮")

    def test_update_payload_only_set_fields(self):
        """测试更新模型只导出设置过的字段"""
        assert DishUpdate().to_payload() == {}
        assert DishUpdate(name="新名字", sale_num=3).to_payload() == {"name": "新名字", "saleNum": 3}

    def test_list_response(self):
        """测试列表响应解析"""
        response = DishListResponse.model_validate({"list": [], "total": 0})

        assert response.list == []
        assert response.total == 0


class TestQueryParams:
    """查询参数测试"""

    def test_only_set_fields_exported(self):
        """测试未设置的筛选条件不导出"""
        params = DishQueryParams(page=1, page_size=10)

        assert params.to_payload() == {"page": 1, "pageSize": 10}

    @pytest.mark.parametrize("field", ["page", "page_size"])
    def test_page_must_be_positive(self, field):
        """测试页码和每页数量必须大于0"""
        values = {"page": 1, "page_size": 10}
        values[field] = 0

        with pytest.raises(ValidationError):
            DishQueryParams(**values)


class TestMisc:
    """其他模型测试"""

    def test_operation_result_defaults(self):
        """测试操作结果默认成功"""
        assert OperationResult.model_validate({}).success is True

    def test_category_timestamps_optional(self):
        """测试分类时间字段可选"""
        category = DishCategory.model_validate({"id": 1, "name": "热菜"})

        assert category.create_time is None
        assert category.to_payload() == {"id": 1, "name": "热菜"}
