"""Pydantic request/response schemas for the Order API.

These are external contracts, separate from the Order and OrderLineItem
aggregates. Request fields that the order service validates default to
empty values so that a missing name or product list is reported by the
service's own gates (HTTP 400) rather than by schema validation.
"""

from pydantic import BaseModel, Field

from ordering.shared.validation import INT32_MAX, INT32_MIN


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    product_id: int = Field(ge=INT32_MIN, le=INT32_MAX)
    product_ean: str = ""


class OrderRequest(BaseModel):
    customer_name: str = ""
    products: list[ProductSchema] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Alice",
                    "products": [
                        {"product_id": 1, "product_ean": "1234567890123"},
                    ],
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ResourceResponse(BaseModel):
    status: int
    message: str
    resourceId: int  # noqa: N815


class OrderLineItemResponse(BaseModel):
    order_id: int
    product_id: int
    product_ean: str
    customer_name: str


class OrderDetailResponse(BaseModel):
    status: int
    message: str
    order: list[OrderLineItemResponse]
